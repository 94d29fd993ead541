"""Factory Method: delegate object creation to factories."""

from abc import ABC, abstractmethod


class Transport(ABC):
    @abstractmethod
    def move(self) -> str:
        ...


class Car(Transport):
    def move(self) -> str:
        return "Driving a car"


class Bike(Transport):
    def move(self) -> str:
        return "Riding a bike"


def before() -> None:
    # Client is hard-wired to concrete classes
    car = Car()
    bike = Bike()
    print(f"FactoryBefore: {car.move()}, {bike.move()}")


class TransportFactory(ABC):
    @abstractmethod
    def create(self) -> Transport:
        ...


class CarFactory(TransportFactory):
    def create(self) -> Transport:
        return Car()


class BikeFactory(TransportFactory):
    def create(self) -> Transport:
        return Bike()


def after() -> None:
    factory: TransportFactory = CarFactory()
    transport = factory.create()
    print(f"FactoryAfter: {transport.move()}")
