"""Phone capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['PhoneGroup']


class PhoneGroup(Group):
    def phone_number(self) -> str:
        """Example: ``'201-886-0269 x3767'``."""
        return self._faker.phone_number()

    def msisdn(self) -> str:
        """Example: ``'4636542165843'``."""
        return self._faker.msisdn()

    def country_calling_code(self) -> str:
        """Example: ``'+27'``."""
        return self._faker.country_calling_code()
