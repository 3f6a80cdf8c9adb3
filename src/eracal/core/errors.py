from __future__ import annotations

from typing import Any


class EracalError(Exception):
    """Base error."""


class RangeError(EracalError, ValueError):
    """A field value lies outside the valid range for that field."""

    def __init__(self, field: Any, value: int, range: Any):
        self.field = field
        self.value = value
        self.range = range
        name = getattr(field, "label", field)
        super().__init__(f"Invalid value for {name} (valid values {range}): {value}")


class TypeMismatchError(EracalError, TypeError):
    """An era or date from another chronology was passed in."""

    def __init__(self, expected: str, actual: Any):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected an era or date of chronology '{expected}', got {actual!r}")


class InvalidEraError(EracalError, ValueError):
    """No era has the requested ordinal value."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Invalid era: {value}")


class _KeyedError(EracalError, KeyError):
    # KeyError.__str__ quotes the message; keep it readable.
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DuplicateChronologyError(_KeyedError):
    """A chronology is already registered under this key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Chronology '{key}' already registered")


class NotFoundError(_KeyedError):
    """No chronology is registered under this key."""

    def __init__(self, key: str, available: Any = ()):
        self.key = key
        msg = f"Unknown chronology '{key}'"
        if available:
            msg += f". Available: {sorted(available)}"
        super().__init__(msg)
