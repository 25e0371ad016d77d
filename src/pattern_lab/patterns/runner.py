"""Runs the registered pattern examples group by group."""

from collections.abc import Iterable

from loguru import logger

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.patterns.registry import GROUPS, discover, examples_for


def group_heading(group: str) -> str:
    return f"{group.capitalize()} Design Patterns:"


def run_group(group: str, narrator: Narrator) -> list[str]:
    """Run every example of ``group`` in order.

    Returns:
        The names of the examples that ran.
    """
    discover()
    examples = examples_for(group)

    narrator.heading(group_heading(group))
    ran = []
    for example_cls in examples:
        logger.debug("Running example {}", example_cls.name)
        example_cls().run(narrator)
        ran.append(example_cls.name)
    narrator.blank()
    return ran


def run_all(narrator: Narrator, groups: Iterable[str] = GROUPS) -> list[str]:
    """Run the given groups (all of them by default) in order."""
    ran = []
    for group in groups:
        ran.extend(run_group(group, narrator))
    logger.info("Ran {} pattern examples", len(ran))
    return ran
