from abc import ABC, abstractmethod
from typing import ClassVar

from src.pattern_lab.core.console import Narrator


class PatternExample(ABC):
    """A self-contained demonstration of one design pattern.

    Subclasses build their own objects inside :meth:`run` and narrate what
    happens; nothing is shared between examples.
    """

    name: ClassVar[str]

    @abstractmethod
    def run(self, narrator: Narrator) -> None:
        """Run the scripted scenario, printing through ``narrator``."""
