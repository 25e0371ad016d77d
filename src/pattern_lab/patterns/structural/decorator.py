"""Decorator: wrapping a message printer in layers at runtime."""

from abc import ABC, abstractmethod

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.patterns.base import PatternExample
from src.pattern_lab.patterns.registry import example_defn


class MessagePrinter(ABC):
    @abstractmethod
    def print_message(self) -> str:
        ...


class Printer(MessagePrinter):
    def print_message(self) -> str:
        return "Message from printer"


class Decorator(MessagePrinter):
    """Base decorator delegating to the wrapped printer.

    With no wrapped printer the message is empty.
    """

    def __init__(self, printer: MessagePrinter | None):
        self._printer = printer

    def print_message(self) -> str:
        if self._printer is None:
            return ""
        return self._printer.print_message()


class DecoratorA(Decorator):
    def print_message(self) -> str:
        return f"wrapped in A : ( {super().print_message()} )"


class DecoratorB(Decorator):
    def print_message(self) -> str:
        return f"wrapped in B : ( {super().print_message()} )"


def decorate(printer: MessagePrinter, *decorators: type[Decorator]) -> MessagePrinter:
    """Wrap ``printer`` in ``decorators``, innermost first."""
    for decorator in decorators:
        printer = decorator(printer)
    return printer


@example_defn(group="structural", order=10)
class DecoratorExample(PatternExample):
    name = "decorator"

    def run(self, narrator: Narrator) -> None:
        narrator.title("Decorator Pattern Example:")

        printer = Printer()
        decorator_a = DecoratorA(printer)
        decorator_b = DecoratorB(decorator_a)
        narrator.line(decorator_b.print_message())

        narrator.line(decorate(Printer(), DecoratorB, DecoratorA, DecoratorA).print_message())
        narrator.blank()
