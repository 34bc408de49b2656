# enigma_errors.py
from __future__ import annotations


class EnigmaError(Exception):
    """Base class for everything this package raises on purpose."""


class InvalidConfiguration(EnigmaError, ValueError):
    """A machine cannot be built from the settings it was given."""
