"""Shared pytest fixtures for the pattern lab tests."""

from .core import *  # noqa: F401,F403
