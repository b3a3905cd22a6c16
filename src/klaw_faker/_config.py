"""Facade configuration: FakerConfig and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass

from faker.config import DEFAULT_LOCALE

from klaw_faker._locales import resolve_locale
from klaw_faker._logging import configure_logging, get_logger

__all__ = [
    'FakerConfig',
    'get_config',
    'init',
]

_log = get_logger(__name__)

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class FakerConfig:
    """Configuration shared by every generator the factory builds.

    Attributes:
        default_locale: Locale used when ``make()``/``fake()`` get no locale.
        seed: Seed applied to each new engine. None = seeded from OS entropy.
        use_weighting: Whether Faker weights choices by real-world frequency.
            Disabling it is faster but less realistic.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging as configured.
    """

    default_locale: str = DEFAULT_LOCALE
    seed: int | None = None
    use_weighting: bool = True
    log_level: str | None = None


# Global configuration (set by init())
_config: FakerConfig | None = None


def _detect_locale() -> str:
    """Read the default locale from KLAW_FAKER_LOCALE, else Faker's default."""
    return os.environ.get('KLAW_FAKER_LOCALE', '').strip() or DEFAULT_LOCALE


def _detect_seed() -> int | None:
    raw = os.environ.get('KLAW_FAKER_SEED', '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        _log.warning('config.invalid_env', variable='KLAW_FAKER_SEED', value=raw)
        return None


def _detect_use_weighting() -> bool:
    raw = os.environ.get('KLAW_FAKER_USE_WEIGHTING', '').strip().lower()
    if not raw or raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    _log.warning('config.invalid_env', variable='KLAW_FAKER_USE_WEIGHTING', value=raw)
    return True


def init(
    default_locale: str | None = None,
    seed: int | None = None,
    use_weighting: bool | None = None,
    log_level: str | None = None,
) -> FakerConfig:
    """Initialize the facade configuration.

    Arguments left as None are read from the environment
    (``KLAW_FAKER_LOCALE``, ``KLAW_FAKER_SEED``, ``KLAW_FAKER_USE_WEIGHTING``).
    Generators already held by the factory keep the configuration they were
    built with.

    Args:
        default_locale: Locale for calls that do not name one.
        seed: Seed applied to every newly built engine.
        use_weighting: Weight random choices by real-world frequency.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging as configured.

    Returns:
        The FakerConfig that was set.

    Raises:
        InvalidLocaleError: If the default locale has no provider data.

    Example:
        ```python
        from klaw_faker import init, fake

        init(default_locale='de_DE', seed=1234)
        fake().city()  # a German city, the same one on every run
        ```
    """
    global _config  # noqa: PLW0603

    # Configure logging first so a rejected locale is reported.
    if log_level is not None:
        configure_logging(log_level)

    locale = resolve_locale(default_locale if default_locale is not None else _detect_locale())

    _config = FakerConfig(
        default_locale=locale,
        seed=seed if seed is not None else _detect_seed(),
        use_weighting=use_weighting if use_weighting is not None else _detect_use_weighting(),
        log_level=log_level,
    )
    return _config


def get_config() -> FakerConfig:
    """Get the current configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config
