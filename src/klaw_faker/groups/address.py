"""Address capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group, draw_float

__all__ = ['AddressGroup']


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class AddressGroup(Group):
    def city_suffix(self) -> str:
        """Example: ``'town'``."""
        return self._faker.city_suffix()

    def street_suffix(self) -> str:
        """Example: ``'Avenue'``."""
        return self._faker.street_suffix()

    def building_number(self) -> str:
        """Example: ``'791'``."""
        return self._faker.building_number()

    def city(self) -> str:
        """Example: ``'Sashabury'``."""
        return self._faker.city()

    def street_name(self) -> str:
        """Example: ``'Crist Parks'``."""
        return self._faker.street_name()

    def street_address(self) -> str:
        """Example: ``'791 Crist Parks'``."""
        return self._faker.street_address()

    def postcode(self) -> str:
        """Example: ``'86039-9874'``."""
        return self._faker.postcode()

    def address(self) -> str:
        """Example: ``'791 Crist Parks, Sashabury, IL 86039-9874'``."""
        return self._faker.address()

    def country(self) -> str:
        """Example: ``'Japan'``."""
        return self._faker.country()

    def latitude(self, min: float = -90, max: float = 90) -> float:
        """Signed degrees between -90 and 90, with 6 decimals.

        Bounds outside the valid range are clamped to it.

        Example: ``77.147489``
        """
        return draw_float(self._faker, 6, _clamp(min, -90, 90), _clamp(max, -90, 90))

    def longitude(self, min: float = -180, max: float = 180) -> float:
        """Signed degrees between -180 and 180, with 6 decimals.

        Bounds outside the valid range are clamped to it.

        Example: ``86.211205``
        """
        return draw_float(self._faker, 6, _clamp(min, -180, 180), _clamp(max, -180, 180))

    def local_coordinates(self) -> list[float]:
        """Latitude and longitude of a place on land in the locale's country.

        Locales whose country has no known land coordinates fall back to
        any place on land.

        Example: ``[77.147489, 86.211205]``
        """
        _, _, territory = self._locale.partition('_')
        coords = self._faker.local_latlng(country_code=territory, coords_only=True)
        if coords is None:
            coords = self._faker.location_on_land(coords_only=True)
        return [float(c) for c in coords]
