"""Digit capability group."""

from __future__ import annotations

from warnings import deprecated

from klaw_faker.groups._base import Group

__all__ = ['DigitGroup']


class DigitGroup(Group):
    def digit(self) -> int:
        """Return a digit between 0 and 9."""
        return self._faker.random_digit()

    @deprecated('Use digit() instead')
    def random_digit(self) -> int:
        """Return a digit between 0 and 9."""
        return self.digit()

    def digit_not_null(self) -> int:
        """Return a digit between 1 and 9."""
        return self._faker.random_digit_not_null()

    @deprecated('Use digit_not_null() instead')
    def random_digit_not_null(self) -> int:
        """Return a digit between 1 and 9."""
        return self.digit_not_null()

    def digit_above_two(self) -> int:
        """Return a digit between 2 and 9."""
        return self._faker.random_digit_above_two()
