"""Design pattern example commands."""

import typer
from rich.table import Table

from src.pattern_lab.patterns import GROUPS, discover, examples_for, run_all

from .utils import console, handle_errors, make_narrator

patterns_app = typer.Typer(help="🧩 Design pattern examples")


@patterns_app.command(name="list")
def list_examples() -> None:
    """
    📋 List the available examples in run order.
    """
    discover()

    table = Table(title="Design Pattern Examples")
    table.add_column("Group", style="green")
    table.add_column("Example", style="cyan")
    for group in GROUPS:
        for example_cls in examples_for(group):
            table.add_row(group, example_cls.name)

    console.print(table)


@patterns_app.command(name="run")
def run_examples(
    group: list[str] = typer.Option(
        None,
        "--group",
        "-g",
        help=f"Group to run; repeatable. One of: {', '.join(GROUPS)}, all. Defaults to all.",
    ),
    example: str | None = typer.Option(
        None, "--example", "-e", help="Run a single example by name"
    ),
    color: bool = typer.Option(True, "--color/--no-color", help="Colorize headings"),
) -> None:
    """
    ▶️  Run the design pattern examples.

    Groups run in the order behavioral, creational, structural unless given
    explicitly.
    """
    narrator = make_narrator(color=color)

    with handle_errors():
        if example:
            discover()
            matches = [
                example_cls
                for name in GROUPS
                for example_cls in examples_for(name)
                if example_cls.name == example
            ]
            if not matches:
                console.print(f"[red]❌ Unknown example '{example}'[/red]")
                raise typer.Exit(1)
            matches[0]().run(narrator)
            return

        groups = list(GROUPS) if not group or "all" in group else group
        unknown = [name for name in groups if name not in GROUPS]
        if unknown:
            console.print(f"[red]❌ Unknown group(s): {', '.join(unknown)}[/red]")
            raise typer.Exit(1)

        run_all(narrator, groups)
