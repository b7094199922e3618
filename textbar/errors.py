"""
Error taxonomy for textbar.

BarError        — base for everything the package raises on purpose.
OutOfRangeError — a value was set above the bar's maximum.
"""


class BarError(Exception):
    """Base class for textbar errors."""


class OutOfRangeError(BarError, ValueError):
    """Raised by Bar.with_value when the value exceeds the maximum."""

    def __init__(self, value: float, maximum: float) -> None:
        self.value = value
        self.maximum = maximum
        super().__init__(f"value {value} exceeds maximum {maximum}")
