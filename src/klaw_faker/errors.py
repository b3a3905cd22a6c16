"""Facade error types: a serializable struct paired with the raised exception.

Only locale resolution fails inside the facade. Argument errors and missing
providers are raised by Faker itself and reach the caller untouched.
"""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidLocale',
    'InvalidLocaleError',
]


class InvalidLocale(msgspec.Struct, frozen=True, gc=False):
    """Locale has no provider data - serializable form of InvalidLocaleError."""

    locale: str
    available: tuple[str, ...] = ()

    def to_exception(self) -> InvalidLocaleError:
        """Convert to the exception so it can be raised."""
        return InvalidLocaleError(self.locale, self.available)


class InvalidLocaleError(Exception):
    """Locale has no provider data - exception variant."""

    def __init__(self, locale: str, available: tuple[str, ...] = ()) -> None:
        self.locale = locale
        self.available = available
        super().__init__(f"Invalid locale: '{locale}'")

    def to_struct(self) -> InvalidLocale:
        """Convert to the struct for encoding or transport."""
        return InvalidLocale(self.locale, self.available)
