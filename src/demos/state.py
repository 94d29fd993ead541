"""State: change behavior when internal state changes."""

from abc import ABC, abstractmethod


class ConditionalDocument:
    def __init__(self):
        self.current_state = "Draft"

    def publish(self) -> None:
        # Transitions are scattered across conditionals
        if self.current_state == "Draft":
            self.current_state = "Moderation"
            print("  Document sent to moderation")
        elif self.current_state == "Moderation":
            self.current_state = "Published"
            print("  Document published")
        else:
            print("  Cannot publish from current state")


def before() -> None:
    print("StateBefore:")
    doc = ConditionalDocument()
    print(f"  Initial: {doc.current_state}")
    doc.publish()
    print(f"  After: {doc.current_state}")


class DocumentState(ABC):
    name = ""

    @abstractmethod
    def publish(self, doc: "Document") -> None:
        ...


class DraftState(DocumentState):
    name = "Draft"

    def publish(self, doc: "Document") -> None:
        print("  Document sent to moderation")
        doc.set_state(ModerationState())


class ModerationState(DocumentState):
    name = "Moderation"

    def publish(self, doc: "Document") -> None:
        print("  Document published")
        doc.set_state(PublishedState())


class PublishedState(DocumentState):
    name = "Published"

    def publish(self, doc: "Document") -> None:
        print("  Already published")


class Document:
    def __init__(self):
        self._state: DocumentState = DraftState()

    def set_state(self, state: DocumentState) -> None:
        self._state = state

    def publish(self) -> None:
        self._state.publish(self)

    @property
    def current_state(self) -> str:
        return self._state.name


def after() -> None:
    print("StateAfter:")
    doc = Document()
    print(f"  Initial: {doc.current_state}")
    doc.publish()
    print(f"  After: {doc.current_state}")
