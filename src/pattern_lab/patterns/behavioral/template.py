"""Template Method: a fixed smart home routine with pluggable steps."""

from abc import ABC, abstractmethod

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.patterns.base import PatternExample
from src.pattern_lab.patterns.registry import example_defn


class SmartHomeTemplate(ABC):
    def __init__(self, narrator: Narrator):
        self._narrator = narrator

    def run_smart_home_system(self) -> None:
        """The template method: the order of the steps never changes."""
        self.initialize_devices()
        self.activate_devices()
        self.deactivate_devices()
        self.cleanup_devices()

    @abstractmethod
    def initialize_devices(self) -> None:
        ...

    def activate_devices(self) -> None:
        self._narrator.line("Template : Activating devices...")

    def deactivate_devices(self) -> None:
        self._narrator.line("Template : Deactivating devices...")

    @abstractmethod
    def cleanup_devices(self) -> None:
        ...


class ConcreteSmartHomeA(SmartHomeTemplate):
    def initialize_devices(self) -> None:
        self._narrator.line("ConcreteA : Initializing devices...")

    def cleanup_devices(self) -> None:
        self._narrator.line("ConcreteA : Cleaning up devices...")


class ConcreteSmartHomeB(SmartHomeTemplate):
    def initialize_devices(self) -> None:
        self._narrator.line("ConcreteB : Initializing devices...")

    def cleanup_devices(self) -> None:
        self._narrator.line("ConcreteB : Cleaning up devices...")


@example_defn(group="behavioral", order=40)
class TemplateExample(PatternExample):
    name = "template"

    def run(self, narrator: Narrator) -> None:
        narrator.title("Template Method Pattern Example:")

        narrator.line("Smart Home System A:")
        ConcreteSmartHomeA(narrator).run_smart_home_system()
        narrator.blank()

        narrator.line("Smart Home System B:")
        ConcreteSmartHomeB(narrator).run_smart_home_system()
        narrator.blank()
