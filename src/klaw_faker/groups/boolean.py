"""Boolean capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['BooleanGroup']


class BooleanGroup(Group):
    def boolean(self, chance_of_getting_true: int = 50) -> bool:
        """Return a boolean, True with the given percent chance.

        Args:
            chance_of_getting_true: Percent chance (0-100) of returning True.

        Example: ``True``
        """
        return self._faker.boolean(chance_of_getting_true)
