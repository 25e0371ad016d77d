"""Singleton: one shared instance behind a global access point."""

import threading
from typing import Optional

from loguru import logger

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.patterns.base import PatternExample
from src.pattern_lab.patterns.registry import example_defn


class Singleton:
    """Lazily created, process-wide single instance.

    Usage:
        first = Singleton.get_instance()
        assert Singleton.get_instance() is first
    """

    _instance: Optional["Singleton"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "Singleton":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    logger.debug("Singleton instance created")
        return cls._instance

    @classmethod
    def get_instance(cls) -> "Singleton":
        return cls()

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance so the next access creates a new one."""
        with cls._lock:
            cls._instance = None

    def do_something(self, narrator: Narrator) -> None:
        narrator.line("Doing something...")


@example_defn(group="creational", order=10)
class SingletonExample(PatternExample):
    name = "singleton"

    def run(self, narrator: Narrator) -> None:
        narrator.title("Singleton Pattern Example:")

        singleton = Singleton.get_instance()
        another_singleton = Singleton.get_instance()

        singleton.do_something(narrator)
        narrator.line(f"Are both instances equals? {singleton is another_singleton}")
        narrator.blank()
