"""Visitor: operations over shapes without changing the shape classes."""

import math
from abc import ABC, abstractmethod

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.patterns.base import PatternExample
from src.pattern_lab.patterns.behavioral.observer import format_number
from src.pattern_lab.patterns.registry import example_defn


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: "ShapeVisitor") -> None:
        ...


class Rectangle(Shape):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def accept(self, visitor: "ShapeVisitor") -> None:
        visitor.visit_rectangle(self)


class Circle(Shape):
    def __init__(self, radius: int):
        self.radius = radius

    def accept(self, visitor: "ShapeVisitor") -> None:
        visitor.visit_circle(self)


class ShapeVisitor(ABC):
    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> None:
        ...

    @abstractmethod
    def visit_circle(self, circle: Circle) -> None:
        ...


class AreaCalculator(ShapeVisitor):
    def __init__(self, narrator: Narrator):
        self._narrator = narrator
        self.total_area = 0.0

    def visit_circle(self, circle: Circle) -> None:
        area = math.pi * circle.radius * circle.radius
        self._narrator.line(f"Circle area: {format_number(area)}")
        self.total_area += area

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        area = float(rectangle.width * rectangle.height)
        self._narrator.line(f"Rectangle area: {format_number(area)}")
        self.total_area += area


class PerimeterCalculator(ShapeVisitor):
    def __init__(self, narrator: Narrator):
        self._narrator = narrator
        self.total_perimeter = 0.0

    def visit_circle(self, circle: Circle) -> None:
        perimeter = 2 * math.pi * circle.radius
        self._narrator.line(f"Circle perimeter: {format_number(perimeter)}")
        self.total_perimeter += perimeter

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        perimeter = float(2 * (rectangle.width + rectangle.height))
        self._narrator.line(f"Rectangle perimeter: {format_number(perimeter)}")
        self.total_perimeter += perimeter


@example_defn(group="behavioral", order=20)
class VisitorExample(PatternExample):
    name = "visitor"

    def run(self, narrator: Narrator) -> None:
        narrator.title("Visitor Pattern Example:")

        shapes: list[Shape] = [Circle(5), Rectangle(4, 6), Circle(3)]

        area_calculator = AreaCalculator(narrator)
        for shape in shapes:
            shape.accept(area_calculator)
        narrator.line(f"Total area: {format_number(area_calculator.total_area)}")

        perimeter_calculator = PerimeterCalculator(narrator)
        for shape in shapes:
            shape.accept(perimeter_calculator)
        narrator.line(f"Total perimeter: {format_number(perimeter_calculator.total_perimeter)}")
        narrator.blank()
