"""Locale identifiers: normalization and validation against Faker's data."""

from __future__ import annotations

import locale as pylocale
from typing import Any

from faker.config import AVAILABLE_LOCALES

from klaw_faker._logging import get_logger
from klaw_faker.errors import InvalidLocaleError

__all__ = [
    'available_locales',
    'normalize_locale',
    'resolve_locale',
]

_log = get_logger(__name__)


def available_locales() -> tuple[str, ...]:
    """Return the locale identifiers Faker ships provider data for, sorted."""
    return tuple(sorted(AVAILABLE_LOCALES))


def normalize_locale(locale: str) -> str:
    """Normalize a locale tag the way Faker does.

    ``en-US`` becomes ``en_US`` and bare languages expand to their usual
    territory (``en`` -> ``en_US``, ``th`` -> ``th_TH``). Encoding suffixes
    are dropped. Faker applies the same rewrite when it builds an engine, so
    the result names the provider data the engine actually loads.
    """
    tag = locale.strip().replace('-', '_')
    if not tag:
        return tag
    return pylocale.normalize(tag).split('.')[0]


def resolve_locale(locale: Any) -> str:
    """Normalize ``locale`` and check that Faker has data for it.

    Raises:
        InvalidLocaleError: If ``locale`` is not a non-empty string naming an
            available locale.
    """
    if not isinstance(locale, str):
        _log.warning('locale.rejected', locale=repr(locale), reason='not a string')
        raise InvalidLocaleError(repr(locale), available_locales())

    normalized = normalize_locale(locale)
    if normalized not in AVAILABLE_LOCALES:
        _log.warning('locale.rejected', locale=locale, normalized=normalized)
        raise InvalidLocaleError(locale, available_locales())
    return normalized
