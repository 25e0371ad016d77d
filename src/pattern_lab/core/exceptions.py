"""Exceptions raised by the pattern lab."""


class PatternLabError(Exception):
    """Base exception for pattern lab errors."""


class ConfigurationError(PatternLabError):
    """Raised when config.yaml cannot be parsed or validated."""


class MediatorNotSetError(PatternLabError):
    """Raised when a device notifies before a mediator has been attached."""


class DatasetAlreadySeededError(PatternLabError):
    """Raised when seeding a bookstore database that already holds authors."""
