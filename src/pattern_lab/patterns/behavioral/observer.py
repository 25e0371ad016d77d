"""Observer: a weather station notifying the displays subscribed to it.

Observers are notified synchronously, in registration order. An observer that
raises stops the fan-out; the exception propagates to whoever changed the
measurements.
"""

import math
from abc import ABC, abstractmethod

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.patterns.base import PatternExample
from src.pattern_lab.patterns.registry import example_defn


def format_number(value: float) -> str:
    """Render whole numbers without a fractional part (20.0 -> "20")."""
    if math.isnan(value):
        return "NaN"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        ...


class DisplayElement(ABC):
    @abstractmethod
    def display(self) -> None:
        ...


class Subject(ABC):
    @abstractmethod
    def register_observer(self, observer: Observer) -> None:
        ...

    @abstractmethod
    def remove_observer(self, observer: Observer) -> None:
        ...

    @abstractmethod
    def notify_observers(self) -> None:
        ...


class WeatherStation(Subject):
    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self.temperature = 0.0
        self.humidity = 0.0
        self.pressure = 0.0

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def register_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        # Removing an observer that never registered is a no-op
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self.temperature, self.humidity, self.pressure)

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.pressure = pressure
        self.notify_observers()


class CurrentConditionsDisplay(Observer, DisplayElement):
    """Shows the latest snapshot it was notified with."""

    def __init__(self, weather_station: Subject, narrator: Narrator):
        self._narrator = narrator
        self.temperature = 0.0
        self.humidity = 0.0
        self.pressure = 0.0
        weather_station.register_observer(self)

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.pressure = pressure
        self.display()

    def display(self) -> None:
        self._narrator.line(
            f"Current conditions: temperature: {format_number(self.temperature)}C, "
            f"humidity: {format_number(self.humidity)}%, "
            f"pressure: {format_number(self.pressure)} hPa"
        )


class StatisticsDisplay(Observer, DisplayElement):
    """Tracks average, maximum and minimum temperature across updates."""

    def __init__(self, weather_station: Subject, narrator: Narrator):
        self._narrator = narrator
        self.max_temp = 0.0
        self.min_temp = 200.0
        self.temp_sum = 0.0
        self.num_readings = 0
        weather_station.register_observer(self)

    @property
    def average(self) -> float:
        """Mean temperature so far; NaN before the first reading."""
        if self.num_readings == 0:
            return math.nan
        return self.temp_sum / self.num_readings

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temp_sum += temperature
        self.num_readings += 1
        self.max_temp = max(self.max_temp, temperature)
        self.min_temp = min(self.min_temp, temperature)
        self.display()

    def display(self) -> None:
        self._narrator.line(
            f"Avg/Max/Min temperature = {format_number(self.average)}"
            f"/{format_number(self.max_temp)}/{format_number(self.min_temp)}"
        )


@example_defn(group="behavioral", order=10)
class ObserverExample(PatternExample):
    name = "observer"

    def run(self, narrator: Narrator) -> None:
        narrator.title("Observer Pattern Example:")
        weather_station = WeatherStation()

        CurrentConditionsDisplay(weather_station, narrator)
        StatisticsDisplay(weather_station, narrator)

        for measurements in ((20, 65, 1000), (21, 70, 1001), (25, 90, 999)):
            weather_station.set_measurements(*measurements)
            narrator.blank()
