from src.pattern_lab.patterns.structural.decorator import (
    Decorator,
    DecoratorA,
    DecoratorB,
    DecoratorExample,
    Printer,
    decorate,
)


class TestDecorators:
    def test_printer_message(self):
        assert Printer().print_message() == "Message from printer"

    def test_nested_decorators(self):
        printer = DecoratorB(DecoratorA(Printer()))
        assert printer.print_message() == "wrapped in B : ( wrapped in A : ( Message from printer ) )"

    def test_decorator_without_inner_printer(self):
        assert Decorator(None).print_message() == ""
        assert DecoratorA(None).print_message() == "wrapped in A : (  )"

    def test_decorate_wraps_innermost_first(self):
        printer = decorate(Printer(), DecoratorA, DecoratorB)
        assert isinstance(printer, DecoratorB)
        assert printer.print_message() == "wrapped in B : ( wrapped in A : ( Message from printer ) )"

    def test_decorate_without_decorators(self):
        printer = Printer()
        assert decorate(printer) is printer

    def test_run_narration(self, narrator, output):
        DecoratorExample().run(narrator)

        assert output() == [
            "Decorator Pattern Example:",
            "wrapped in B : ( wrapped in A : ( Message from printer ) )",
            "wrapped in A : ( wrapped in A : ( wrapped in B : ( Message from printer ) ) )",
            "",
        ]
