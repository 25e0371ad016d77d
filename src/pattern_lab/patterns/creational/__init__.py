"""Creational pattern examples."""
