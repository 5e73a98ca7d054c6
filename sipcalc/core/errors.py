"""Error kinds raised by the projection engine."""

from __future__ import annotations

from typing import Optional


class SIPError(ValueError):
    """Base class for every calculation failure surfaced to callers."""


class InvalidParameter(SIPError):
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DivisionByZero(SIPError, ZeroDivisionError):
    """A formula would divide by zero (zero principal or a -100% monthly rate)."""
