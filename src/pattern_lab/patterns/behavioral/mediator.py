"""Mediator: smart home devices coordinating only through a hub.

Devices never call each other. They report events to the hub, which decides
which devices react.
"""

from abc import ABC, abstractmethod

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.core.exceptions import MediatorNotSetError
from src.pattern_lab.patterns.base import PatternExample
from src.pattern_lab.patterns.registry import example_defn

MOTION_DETECTED = "MOTION DETECTED!"
NIGHT_MODE = "NIGHT MODE"
DAILY_MODE = "DAILY MODE"
TEMPERATURE_THRESHOLD_REACHED = "TEMPERATURE THRESHOLD REACHED"


class Mediator(ABC):
    @abstractmethod
    def notify(self, sender: "SmartDevice", event_name: str) -> None:
        ...


class SmartDevice:
    def __init__(self, narrator: Narrator):
        self._narrator = narrator
        self._mediator: Mediator | None = None

    def set_mediator(self, mediator: Mediator) -> None:
        self._mediator = mediator

    def _notify(self, event_name: str) -> None:
        if self._mediator is None:
            raise MediatorNotSetError(
                f"{type(self).__name__} cannot report '{event_name}' without a mediator"
            )
        self._mediator.notify(self, event_name)


class LightingSystem(SmartDevice):
    def turn_on_lights(self) -> None:
        self._narrator.line("Turning on lights...")

    def adjust_brightness(self) -> None:
        self._narrator.line("Adjusting brightness...")

    def activate_night_mode(self) -> None:
        self._narrator.line("Activating nightmode...")

    def motion_detected(self) -> None:
        self._narrator.line("Motion detected...")
        self._notify(MOTION_DETECTED)


class SecuritySystem(SmartDevice):
    def activate_alarm(self) -> None:
        self._narrator.line("Activating the alarm...")

    def activate_night_surveillance(self) -> None:
        self._narrator.line("Activating night surveillance system")

    def start_night_mode(self) -> None:
        self._narrator.line("Starting nightmode")
        self._notify(NIGHT_MODE)

    def start_daily_mode(self) -> None:
        self._narrator.line("Activating daily mode")
        self._notify(DAILY_MODE)


class ClimateControlSystem(SmartDevice):
    def adjust_temperature(self) -> None:
        self._narrator.line("Adjusting temperature...")

    def set_night_temperature(self) -> None:
        self._narrator.line("Setting night temperature...")

    def temperature_threshold_reached(self) -> None:
        self._narrator.line("Temperature threshold reached...")
        self._notify(TEMPERATURE_THRESHOLD_REACHED)


class SmartHomeHub(Mediator):
    """Concrete mediator owning every device of the home."""

    def __init__(
        self,
        lighting_system: LightingSystem,
        security_system: SecuritySystem,
        climate_control_system: ClimateControlSystem,
    ):
        self.lighting_system = lighting_system
        self.security_system = security_system
        self.climate_control_system = climate_control_system

        for device in (lighting_system, security_system, climate_control_system):
            device.set_mediator(self)

    def notify(self, sender: SmartDevice, event_name: str) -> None:
        # Unknown sender/event pairs are ignored
        if isinstance(sender, LightingSystem):
            if event_name == MOTION_DETECTED:
                self.lighting_system.turn_on_lights()
                self.security_system.activate_alarm()
        elif isinstance(sender, SecuritySystem):
            if event_name == NIGHT_MODE:
                self.lighting_system.activate_night_mode()
                self.security_system.activate_night_surveillance()
                self.climate_control_system.set_night_temperature()
            elif event_name == DAILY_MODE:
                self.lighting_system.adjust_brightness()
                self.security_system.activate_alarm()
                self.climate_control_system.adjust_temperature()
        elif isinstance(sender, ClimateControlSystem):
            if event_name == TEMPERATURE_THRESHOLD_REACHED:
                self.security_system.activate_alarm()


@example_defn(group="behavioral", order=30)
class MediatorExample(PatternExample):
    name = "mediator"

    def run(self, narrator: Narrator) -> None:
        narrator.title("Mediator Pattern Example:")

        lighting_system = LightingSystem(narrator)
        security_system = SecuritySystem(narrator)
        climate_control_system = ClimateControlSystem(narrator)
        SmartHomeHub(lighting_system, security_system, climate_control_system)

        scenarios = (
            ("Motion detection scenario:", lighting_system.motion_detected),
            ("Temperature threshold scenario:", climate_control_system.temperature_threshold_reached),
            ("Night mode activation scenario:", security_system.start_night_mode),
            ("Daily mode activation scenario:", security_system.start_daily_mode),
        )
        for title, trigger in scenarios:
            narrator.title(title)
            trigger()
            narrator.blank()
