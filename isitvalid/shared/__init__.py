"""Outcome type, error taxonomy, constants and validators shared across the library."""
