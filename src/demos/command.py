"""Command: encapsulate a request as an object."""

from abc import ABC, abstractmethod
from typing import Optional


class Light:
    def turn_on(self) -> None:
        print("  Light is ON")

    def turn_off(self) -> None:
        print("  Light is OFF")


class HardWiredRemote:
    def press_button(self, light: Light, action: str) -> None:
        # Remote knows about Light; every new device means editing this class
        if action == "on":
            light.turn_on()
        elif action == "off":
            light.turn_off()


def before() -> None:
    print("CommandBefore:")
    remote = HardWiredRemote()
    light = Light()
    remote.press_button(light, "on")
    remote.press_button(light, "off")


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        ...


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> None:
        self._light.turn_on()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> None:
        self._light.turn_off()


class RemoteControl:
    """Invoker: runs whatever command is loaded."""

    def __init__(self):
        self._command: Optional[Command] = None

    def set_command(self, command: Command) -> None:
        self._command = command

    def press_button(self) -> None:
        if self._command is not None:
            self._command.execute()


def after() -> None:
    print("CommandAfter:")
    light = Light()
    remote = RemoteControl()

    remote.set_command(LightOnCommand(light))
    remote.press_button()

    remote.set_command(LightOffCommand(light))
    remote.press_button()
