"""Console narration for the examples.

Every example prints through a :class:`Narrator` so that output can be sent to
the terminal, captured in tests, or colored according to configuration.
"""

from rich.console import Console

from src.pattern_lab.runtime.context import get_config


class Narrator:
    """Writes scripted example output to a Rich console."""

    def __init__(self, console: Console | None = None, color: bool | None = None):
        console_config = get_config().console
        self._color = console_config.color if color is None else color
        self._heading_style = console_config.heading_style
        self._title_style = console_config.title_style
        self._console = console or Console(
            soft_wrap=True,
            highlight=False,
            emoji=False,
            no_color=not self._color,
        )

    @property
    def console(self) -> Console:
        return self._console

    def _print(self, text: str, style: str | None = None) -> None:
        # Book titles may contain brackets; never interpret them as markup
        self._console.print(
            text,
            style=style if self._color else None,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def heading(self, text: str) -> None:
        """Print a group or query heading."""
        self._print(text, self._heading_style)

    def title(self, text: str) -> None:
        """Print an example or scenario title."""
        self._print(text, self._title_style)

    def line(self, text: str = "") -> None:
        """Print a plain line of narration."""
        self._print(text)

    def blank(self) -> None:
        self._print("")
