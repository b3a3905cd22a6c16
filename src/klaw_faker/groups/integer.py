"""Integer capability group."""

from __future__ import annotations

from warnings import deprecated

from klaw_faker.groups._base import Group

__all__ = ['IntegerGroup']

INT32_MAX = 2147483647


class IntegerGroup(Group):
    def integer(self, min: int = 0, max: int = INT32_MAX) -> int:
        """Return a random integer in ``[min, max]``.

        Raises:
            ValueError: If ``min`` is greater than ``max`` (raised by the engine).

        Example: ``79907610``
        """
        return self._faker.random_int(min, max)

    @deprecated('Use integer() instead')
    def number_between(self, min: int = 0, max: int = INT32_MAX) -> int:
        """Return a random integer in ``[min, max]``."""
        return self.integer(min, max)

    def random_number(self, nb_digits: int | None = None, strict: bool = False) -> int:
        """Return a random integer with up to ``nb_digits`` digits.

        Args:
            nb_digits: Maximum number of digits. Drawn at random if None.
            strict: If True, the number has exactly ``nb_digits`` digits.

        Example: ``79907610``
        """
        return self._faker.random_number(nb_digits, strict)
