"""Behavioral pattern examples."""
