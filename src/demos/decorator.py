"""Decorator: add responsibilities to an object dynamically."""

from abc import ABC, abstractmethod


class Coffee:
    description = "Plain coffee"

    def cost(self) -> float:
        return 1.0


def before() -> None:
    # Every add-on combination would need its own subclass
    plain = Coffee()
    print(f"DecoratorBefore: {plain.description} costs {plain.cost():g}")


class Beverage(ABC):
    @property
    @abstractmethod
    def description(self) -> str:
        ...

    @abstractmethod
    def cost(self) -> float:
        ...


class SimpleCoffee(Beverage):
    @property
    def description(self) -> str:
        return "Coffee"

    def cost(self) -> float:
        return 1.0


class AddOnDecorator(Beverage):
    """Wraps a beverage and extends its description and cost."""

    def __init__(self, beverage: Beverage):
        self._beverage = beverage


class Milk(AddOnDecorator):
    @property
    def description(self) -> str:
        return self._beverage.description + ", milk"

    def cost(self) -> float:
        return self._beverage.cost() + 0.5


class Sugar(AddOnDecorator):
    @property
    def description(self) -> str:
        return self._beverage.description + ", sugar"

    def cost(self) -> float:
        return self._beverage.cost() + 0.2


def after() -> None:
    beverage: Beverage = SimpleCoffee()
    beverage = Milk(beverage)
    beverage = Sugar(beverage)
    print(f"DecoratorAfter: {beverage.description} costs {beverage.cost():g}")
