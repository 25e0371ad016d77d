"""Design pattern examples grouped as behavioral, creational and structural."""

from .base import PatternExample
from .registry import GROUPS, discover, example_defn, examples_for
from .runner import run_all, run_group

__all__ = [
    "GROUPS",
    "PatternExample",
    "discover",
    "example_defn",
    "examples_for",
    "run_all",
    "run_group",
]
