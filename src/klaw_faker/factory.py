"""Factory: resolves locales and builds generators.

Generators returned by ``make()`` are kept in a keyed registry, one per
locale, for the life of the process. Entries are only removed through
``forget()`` or ``clear()``. ``create()`` bypasses the registry and always
builds a fresh engine.

Example:
    ```python
    from klaw_faker import Factory

    Factory.make() is Factory.make()  # True: cached per locale
    Factory.make('de-DE').locale  # 'de_DE'
    Factory.create('de_DE', seed=7)  # private engine with its own stream
    ```
"""

from __future__ import annotations

import threading
from typing import ClassVar

from faker import Faker

from klaw_faker._config import get_config
from klaw_faker._locales import available_locales, resolve_locale
from klaw_faker._logging import get_logger
from klaw_faker.generator import Generator

__all__ = ['Factory']

_log = get_logger(__name__)


class Factory:
    """Process-wide entry point for building generators."""

    _registry: ClassVar[dict[str, Generator]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def make(cls, locale: str | None = None) -> Generator:
        """Return the shared generator for ``locale``.

        The first request for a locale builds its engine. Later requests
        return the same instance.

        Args:
            locale: Locale identifier such as ``'en_US'`` or ``'pt-BR'``.
                Defaults to the configured default locale.

        Returns:
            A generator whose engine is fully initialized for the locale.

        Raises:
            InvalidLocaleError: If the locale has no provider data.
        """
        resolved = cls._resolve(locale)
        with cls._lock:
            generator = cls._registry.get(resolved)
            if generator is None:
                generator = cls._build(resolved, None)
                cls._registry[resolved] = generator
        return generator

    @classmethod
    def create(cls, locale: str | None = None, *, seed: int | None = None) -> Generator:
        """Build a new generator that is not shared through the registry.

        Args:
            locale: Locale identifier. Defaults to the configured default locale.
            seed: Seed for the engine's random stream. Falls back to the
                configured seed, then to OS entropy.

        Raises:
            InvalidLocaleError: If the locale has no provider data.
        """
        return cls._build(cls._resolve(locale), seed)

    @classmethod
    def locales(cls) -> tuple[str, ...]:
        """Return every supported locale identifier."""
        return available_locales()

    @classmethod
    def forget(cls, locale: str) -> bool:
        """Drop the cached generator for ``locale``.

        Returns:
            True if a generator was cached for the locale.
        """
        resolved = resolve_locale(locale)
        with cls._lock:
            return cls._registry.pop(resolved, None) is not None

    @classmethod
    def clear(cls) -> None:
        """Drop every cached generator."""
        with cls._lock:
            cls._registry.clear()

    @staticmethod
    def _resolve(locale: str | None) -> str:
        if locale is None:
            return get_config().default_locale
        return resolve_locale(locale)

    @staticmethod
    def _build(locale: str, seed: int | None) -> Generator:
        config = get_config()
        if seed is None:
            seed = config.seed

        engine = Faker(locale, use_weighting=config.use_weighting)
        # seed_instance(None) still gives the engine a private random stream.
        engine.seed_instance(seed)

        _log.debug('engine.created', locale=locale, seeded=seed is not None)
        return Generator(engine, locale)
