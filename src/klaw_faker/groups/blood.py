"""Blood capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['BLOOD_RH_FACTORS', 'BLOOD_TYPES', 'BloodGroup']

BLOOD_TYPES = ('A', 'AB', 'B', 'O')
BLOOD_RH_FACTORS = ('+', '-')


class BloodGroup(Group):
    def blood_type(self) -> str:
        """Example: ``'AB'``."""
        return self._faker.random_element(BLOOD_TYPES)

    def blood_rh(self) -> str:
        """Example: ``'+'``."""
        return self._faker.random_element(BLOOD_RH_FACTORS)

    def blood_group(self) -> str:
        """Blood type followed by its Rh factor, e.g. ``'AB+'``."""
        return f'{self.blood_type()}{self.blood_rh()}'
