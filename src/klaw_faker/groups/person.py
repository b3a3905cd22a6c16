"""Person capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['PersonGroup']


class PersonGroup(Group):
    def name(self) -> str:
        """Example: ``'Dr. Zane Stroman'``."""
        return self._faker.name()

    def first_name(self) -> str:
        """Example: ``'Maynard'``."""
        return self._faker.first_name()

    def first_name_male(self) -> str:
        """Example: ``'Maynard'``."""
        return self._faker.first_name_male()

    def first_name_female(self) -> str:
        """Example: ``'Rachel'``."""
        return self._faker.first_name_female()

    def last_name(self) -> str:
        """Example: ``'Zulauf'``."""
        return self._faker.last_name()

    def title(self) -> str:
        """Example: ``'Ms.'``."""
        return self._faker.prefix()

    def title_male(self) -> str:
        """Example: ``'Mr.'``."""
        return self._faker.prefix_male()

    def title_female(self) -> str:
        """Example: ``'Ms.'``."""
        return self._faker.prefix_female()

    def suffix(self) -> str:
        """Example: ``'Jr.'``."""
        return self._faker.suffix()
