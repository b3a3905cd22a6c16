"""Decimal capability group.

``float`` shadows the builtin inside the class body, so annotations use
``builtins.float`` explicitly.
"""

from __future__ import annotations

import builtins
from warnings import deprecated

from klaw_faker.groups._base import Group, draw_float

__all__ = ['DecimalGroup']


class DecimalGroup(Group):
    def float(
        self,
        nb_max_decimals: int | None = None,
        min: builtins.float = 0,
        max: builtins.float | None = None,
    ) -> builtins.float:
        """Return a random float in ``[min, max]``.

        Args:
            nb_max_decimals: Maximum number of decimals. Drawn at random if None.
            min: Lower bound.
            max: Upper bound. Drawn at random (not below ``min``) if None.

        Reversed bounds are swapped.

        Example: ``48.8932``
        """
        return draw_float(self._faker, nb_max_decimals, min, max)

    @deprecated('Use float() instead')
    def random_float(
        self,
        nb_max_decimals: int | None = None,
        min: builtins.float = 0,
        max: builtins.float | None = None,
    ) -> builtins.float:
        """Return a random float in ``[min, max]``.

        Example: ``48.8932``
        """
        return self.float(nb_max_decimals, min, max)
