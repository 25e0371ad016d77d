"""
Pattern example registry.

Examples register themselves with a group and a position inside that group:

    @example_defn(group="behavioral", order=10)
    class ObserverExample(PatternExample):
        ...

The runner imports every module below ``src.pattern_lab.patterns`` so the
decorators have fired before a group is listed.
"""

import importlib
import pkgutil
from collections.abc import Callable
from typing import TypeVar

from loguru import logger

from src.pattern_lab.patterns.base import PatternExample

GROUPS: tuple[str, ...] = ("behavioral", "creational", "structural")

# central registry: group -> [(order, example class)]
_EXAMPLES_BY_GROUP: dict[str, list[tuple[int, type[PatternExample]]]] = {
    group: [] for group in GROUPS
}

E = TypeVar("E", bound=type[PatternExample])


def example_defn(*, group: str, order: int) -> Callable[[E], E]:
    """Register a PatternExample subclass under ``group`` at position ``order``."""
    if group not in _EXAMPLES_BY_GROUP:
        raise ValueError(f"Unknown example group '{group}'; expected one of {GROUPS}")

    def decorator(cls: E) -> E:
        entries = _EXAMPLES_BY_GROUP[group]
        if all(existing is not cls for _, existing in entries):
            entries.append((order, cls))
            logger.trace("Registered example {} in group {}", cls.__name__, group)
        return cls

    return decorator


def discover(package: str = "src.pattern_lab.patterns") -> None:
    """Recursively import every module in ``package`` to trigger registration."""
    pkg = importlib.import_module(package)
    for module_info in pkgutil.walk_packages(pkg.__path__, prefix=f"{package}."):
        importlib.import_module(module_info.name)


def examples_for(group: str) -> list[type[PatternExample]]:
    """Return the example classes of ``group`` in run order."""
    if group not in _EXAMPLES_BY_GROUP:
        raise ValueError(f"Unknown example group '{group}'; expected one of {GROUPS}")
    return [cls for _, cls in sorted(_EXAMPLES_BY_GROUP[group], key=lambda entry: entry[0])]
