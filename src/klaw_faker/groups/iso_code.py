"""ISO code capability group."""

from __future__ import annotations

from warnings import deprecated

from klaw_faker.groups._base import Group

__all__ = ['IsoCodeGroup']


class IsoCodeGroup(Group):
    def country_code(self) -> str:
        """ISO 3166-1 alpha-2 country code, e.g. ``'FR'``."""
        return self._faker.country_code(representation='alpha-2')

    @deprecated('Use country_code() instead')
    def country_iso_alpha2(self) -> str:
        """ISO 3166-1 alpha-2 country code, e.g. ``'FR'``."""
        return self.country_code()

    def country_iso_alpha3(self) -> str:
        """ISO 3166-1 alpha-3 country code, e.g. ``'FRA'``."""
        return self._faker.country_code(representation='alpha-3')

    def language_code(self) -> str:
        """ISO 639-1 language code, e.g. ``'fr'``."""
        return self._faker.language_code()

    def currency_code(self) -> str:
        """ISO 4217 currency code, e.g. ``'EUR'``."""
        return self._faker.currency_code()

    def locale_code(self) -> str:
        """Locale identifier, e.g. ``'fr_FR'``."""
        return self._faker.locale()
