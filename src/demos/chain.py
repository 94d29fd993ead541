"""Chain of Responsibility: pass a request along a chain of handlers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class SupportRequest:
    issue: str = ""
    level: str = ""


def before() -> None:
    print("ChainBefore:")
    request = SupportRequest(issue="Critical bug", level="High")

    # Routing is one rigid, centralized conditional
    if request.level == "Low":
        print("  Junior support handles it")
    elif request.level == "Medium":
        print("  Senior support handles it")
    elif request.level == "High":
        print("  Manager handles it")


class SupportHandler(ABC):
    def __init__(self):
        self._next: Optional["SupportHandler"] = None

    def set_next(self, handler: "SupportHandler") -> "SupportHandler":
        self._next = handler
        return handler

    def pass_on(self, request: SupportRequest) -> None:
        if self._next is not None:
            self._next.handle(request)

    @abstractmethod
    def handle(self, request: SupportRequest) -> None:
        ...


class JuniorSupport(SupportHandler):
    def handle(self, request: SupportRequest) -> None:
        if request.level == "Low":
            print("  Junior support handles it")
        else:
            self.pass_on(request)


class SeniorSupport(SupportHandler):
    def handle(self, request: SupportRequest) -> None:
        if request.level == "Medium":
            print("  Senior support handles it")
        else:
            self.pass_on(request)


class Manager(SupportHandler):
    def handle(self, request: SupportRequest) -> None:
        print("  Manager handles it")


def after() -> None:
    print("ChainAfter:")
    junior = JuniorSupport()
    junior.set_next(SeniorSupport()).set_next(Manager())

    junior.handle(SupportRequest(issue="Critical bug", level="High"))
