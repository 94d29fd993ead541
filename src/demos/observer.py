"""Observer: notify dependents of state changes."""

from typing import Callable, List


class Stock:
    def __init__(self, price: int = 0):
        self.price = price


def before() -> None:
    stock = Stock(price=100)
    print(f"ObserverBefore: current price {stock.price}")
    stock.price = 110
    # Interested parties have to poll to notice the change
    print(f"ObserverBefore after change: current price {stock.price}")


class StockPublisher:
    """Publishes every price change to its subscribers."""

    def __init__(self):
        self._price = 0
        self._subscribers: List[Callable[[int], None]] = []

    def subscribe(self, callback: Callable[[int], None]) -> None:
        self._subscribers.append(callback)

    @property
    def price(self) -> int:
        return self._price

    @price.setter
    def price(self, value: int) -> None:
        self._price = value
        for callback in self._subscribers:
            callback(value)


def after() -> None:
    publisher = StockPublisher()
    publisher.subscribe(lambda price: print(f"ObserverAfter: notified price {price}"))
    publisher.price = 200
    publisher.price = 210
