"""
Fehlertypen der Berechnungs-Engine.
"""


class LaborCalcError(Exception):
    """Base class for all errors raised by laborcalc."""


class MalformedTimeError(LaborCalcError, ValueError):
    """Raised when a time-of-day value is not a valid "HH:MM" string or time."""

    def __init__(self, value: object, reason: str = "expected HH:MM"):
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed time {value!r}: {reason}")
