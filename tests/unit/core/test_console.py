import io

from rich.console import Console

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.runtime.config.config_data import ConfigData
from src.pattern_lab.runtime.context import with_context


class TestNarrator:
    def test_lines_are_printed_verbatim(self, narrator, output):
        narrator.heading("Behavioral Design Patterns:")
        narrator.title("Observer Pattern Example:")
        narrator.line("Title: [Bracketed] :smile:")
        narrator.blank()

        assert output() == [
            "Behavioral Design Patterns:",
            "Observer Pattern Example:",
            "Title: [Bracketed] :smile:",
            "",
        ]

    def test_long_lines_are_not_wrapped(self, output):
        console = Console(file=io.StringIO(), width=20, color_system=None)
        narrator = Narrator(console=console, color=False)

        narrator.line("Title: The Lord of the Rings: The Return of the King, Price: 29.99")

        assert console.file.getvalue() == "Title: The Lord of the Rings: The Return of the King, Price: 29.99\n"

    def test_heading_style_from_config(self):
        console = Console(file=io.StringIO(), color_system="standard", force_terminal=True)
        override = ConfigData()
        override.console.heading_style = "red"

        with with_context(override):
            narrator = Narrator(console=console, color=True)
        narrator.heading("Creational Design Patterns:")

        assert "\x1b[31m" in console.file.getvalue()

    def test_color_disabled_prints_plain_text(self):
        console = Console(file=io.StringIO(), color_system="standard", force_terminal=True)
        Narrator(console=console, color=False).heading("Structural Design Patterns:")

        assert console.file.getvalue() == "Structural Design Patterns:\n"
