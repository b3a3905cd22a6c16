"""Time capability group.

Relative bounds accept Faker's date strings (``'-30y'``, ``'now'``,
``'+1d'``) as well as ``date``/``datetime`` objects and timestamps.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import TYPE_CHECKING

from klaw_faker.groups._base import Group

if TYPE_CHECKING:
    from faker.typing import DateParseType

__all__ = ['TimeGroup']


class TimeGroup(Group):
    def unix_time(self, max: DateParseType = 'now') -> float:
        """Seconds since the epoch, up to ``max``. Example: ``58781813.0``."""
        return self._faker.unix_time(end_datetime=max)

    def date_time(self, max: DateParseType = 'now', timezone: tzinfo | None = None) -> datetime:
        """Example: ``datetime(2005, 8, 16, 20, 39, 21)``."""
        return self._faker.date_time(tzinfo=timezone, end_datetime=max)

    def date_time_ad(self, max: DateParseType = 'now', timezone: tzinfo | None = None) -> datetime:
        """Any datetime since year 1. Example: ``datetime(1800, 4, 29, 20, 38, 49)``."""
        return self._faker.date_time_ad(tzinfo=timezone, end_datetime=max)

    def iso8601(self, max: DateParseType = 'now') -> str:
        """Example: ``'1978-12-09T10:10:29'``."""
        return self._faker.iso8601(end_datetime=max)

    def date(self, format: str = '%Y-%m-%d', max: DateParseType = 'now') -> str:
        """Example: ``'1979-06-09'``."""
        return self._faker.date(format, max)

    def time(self, format: str = '%H:%M:%S', max: DateParseType = 'now') -> str:
        """Example: ``'20:49:42'``."""
        return self._faker.time(format, max)

    def date_time_between(
        self,
        start_date: DateParseType = '-30y',
        end_date: DateParseType = 'now',
        timezone: tzinfo | None = None,
    ) -> datetime:
        """Return a datetime between ``start_date`` and ``end_date``.

        Raises:
            ValueError: If ``end_date`` precedes ``start_date`` (raised by the engine).

        Example: ``date_time_between('-30y', 'now')`` -> ``datetime(2003, 3, 15, 10, 22, 56)``
        """
        return self._faker.date_time_between(start_date, end_date, timezone)

    def date_time_this_century(self, before_now: bool = True, after_now: bool = False) -> datetime:
        return self._faker.date_time_this_century(before_now, after_now)

    def date_time_this_decade(self, before_now: bool = True, after_now: bool = False) -> datetime:
        return self._faker.date_time_this_decade(before_now, after_now)

    def date_time_this_year(self, before_now: bool = True, after_now: bool = False) -> datetime:
        return self._faker.date_time_this_year(before_now, after_now)

    def date_time_this_month(self, before_now: bool = True, after_now: bool = False) -> datetime:
        return self._faker.date_time_this_month(before_now, after_now)

    def am_pm(self) -> str:
        """Example: ``'AM'``."""
        return self._faker.am_pm()

    def day_of_month(self) -> str:
        """Example: ``'04'``."""
        return self._faker.day_of_month()

    def day_of_week(self) -> str:
        """Example: ``'Friday'``."""
        return self._faker.day_of_week()

    def month(self) -> str:
        """Example: ``'06'``."""
        return self._faker.month()

    def month_name(self) -> str:
        """Example: ``'January'``."""
        return self._faker.month_name()

    def year(self) -> str:
        """Example: ``'1993'``."""
        return self._faker.year()

    def century(self) -> str:
        """Example: ``'IV'``."""
        return self._faker.century()

    def timezone(self) -> str:
        """Example: ``'Europe/Paris'``."""
        return self._faker.timezone()
