"""Visitor: add operations to a class hierarchy without modifying it."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

PI = 3.14


@dataclass
class PlainCircle:
    radius: float = 5


@dataclass
class PlainRectangle:
    width: float = 10
    height: float = 5


def before() -> None:
    print("VisitorBefore:")
    circle = PlainCircle()
    rect = PlainRectangle()

    # Each new operation is written inline against every shape type
    circle_area = PI * circle.radius * circle.radius
    rect_area = rect.width * rect.height

    print(f"  Circle area: {circle_area:.2f}")
    print(f"  Rectangle area: {rect_area:.2f}")


class ShapeVisitor(ABC):
    @abstractmethod
    def visit_circle(self, circle: "Circle") -> None:
        ...

    @abstractmethod
    def visit_rectangle(self, rectangle: "Rectangle") -> None:
        ...


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> None:
        ...


@dataclass
class Circle(Shape):
    radius: float = 5

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_circle(self)


@dataclass
class Rectangle(Shape):
    width: float = 10
    height: float = 5

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_rectangle(self)


class AreaCalculator(ShapeVisitor):
    def __init__(self):
        self.total_area = 0.0

    def visit_circle(self, circle: Circle) -> None:
        area = PI * circle.radius * circle.radius
        print(f"  Circle area: {area:.2f}")
        self.total_area += area

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        area = rectangle.width * rectangle.height
        print(f"  Rectangle area: {area:.2f}")
        self.total_area += area


def after() -> None:
    print("VisitorAfter:")
    shapes: List[Shape] = [Circle(), Rectangle()]
    calculator = AreaCalculator()

    for shape in shapes:
        shape.accept(calculator)
