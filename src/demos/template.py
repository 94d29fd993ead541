"""Template Method: define the skeleton of an algorithm once."""

from abc import ABC, abstractmethod


class CoffeeRecipe:
    def make(self) -> None:
        print("  Boil water")
        print("  Brew coffee grounds")
        print("  Pour in cup")
        print("  Add sugar")


class TeaRecipe:
    def make(self) -> None:
        print("  Boil water")
        print("  Steep tea bag")
        print("  Pour in cup")
        print("  Add lemon")


def before() -> None:
    # Boil and pour are duplicated in both recipes
    print("TemplateBefore Coffee:")
    CoffeeRecipe().make()
    print("TemplateBefore Tea:")
    TeaRecipe().make()


class BeverageRecipe(ABC):
    def make(self) -> None:
        """Template method: fixed sequence, variable steps."""
        self._boil_water()
        self.brew()
        self._pour_in_cup()
        self.add_condiments()

    def _boil_water(self) -> None:
        print("  Boil water")

    def _pour_in_cup(self) -> None:
        print("  Pour in cup")

    @abstractmethod
    def brew(self) -> None:
        ...

    @abstractmethod
    def add_condiments(self) -> None:
        ...


class Coffee(BeverageRecipe):
    def brew(self) -> None:
        print("  Brew coffee grounds")

    def add_condiments(self) -> None:
        print("  Add sugar")


class Tea(BeverageRecipe):
    def brew(self) -> None:
        print("  Steep tea bag")

    def add_condiments(self) -> None:
        print("  Add lemon")


def after() -> None:
    print("TemplateAfter Coffee:")
    Coffee().make()
    print("TemplateAfter Tea:")
    Tea().make()
