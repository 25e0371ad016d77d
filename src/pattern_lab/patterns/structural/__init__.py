"""Structural pattern examples."""
