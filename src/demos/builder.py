"""Builder: construct a complex object step by step."""

from dataclasses import dataclass


@dataclass
class Pizza:
    size: str = ""
    cheese: bool = False
    pepperoni: bool = False
    olives: bool = False
    mushrooms: bool = False

    def __str__(self) -> str:
        return f"Pizza: {self.size}, cheese={self.cheese}, pepperoni={self.pepperoni}"


def before() -> None:
    print("BuilderBefore:")
    # Long positional constructor: easy to swap two flags by mistake
    pizza = Pizza("Large", True, True, False, True)
    print(f"  Pizza: {pizza.size}, cheese={pizza.cheese}, pepperoni={pizza.pepperoni}")


class PizzaBuilder:
    """Fluent builder; every step returns the builder."""

    def __init__(self):
        self._pizza = Pizza()

    def set_size(self, size: str) -> "PizzaBuilder":
        self._pizza.size = size
        return self

    def add_cheese(self) -> "PizzaBuilder":
        self._pizza.cheese = True
        return self

    def add_pepperoni(self) -> "PizzaBuilder":
        self._pizza.pepperoni = True
        return self

    def add_olives(self) -> "PizzaBuilder":
        self._pizza.olives = True
        return self

    def add_mushrooms(self) -> "PizzaBuilder":
        self._pizza.mushrooms = True
        return self

    def build(self) -> Pizza:
        return self._pizza


def after() -> None:
    print("BuilderAfter:")
    pizza = (
        PizzaBuilder()
        .set_size("Large")
        .add_cheese()
        .add_pepperoni()
        .add_mushrooms()
        .build()
    )
    print(f"  {pizza}")
