"""Conversions to arbitrary-precision integers and the zero-value interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


def to_bigint(value: int) -> int:
    """Return ``value`` as a signed arbitrary-precision integer.

    Booleans are not integers here; they raise :class:`TypeError`.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"cannot convert {type(value).__name__} to a signed integer")
    return int(value)


def to_biguint(value: int | bool) -> int:
    """Return ``value`` as a non-negative arbitrary-precision integer.

    ``True`` and ``False`` map to 1 and 0; negative values raise
    :class:`ValueError`.
    """
    if isinstance(value, bool):
        return 1 if value else 0
    if not isinstance(value, int):
        raise TypeError(f"cannot convert {type(value).__name__} to an unsigned integer")
    if value < 0:
        raise ValueError(f"cannot convert negative value {value} to an unsigned integer")
    return int(value)


class Zero(ABC):
    """A type with a distinguished zero element."""

    @classmethod
    @abstractmethod
    def zero(cls) -> Zero:
        """Return the zero element of the type."""

    def is_zero(self) -> bool:
        """Return whether this value equals the zero element."""
        return self == type(self).zero()