"""Function-style shortcut for the factory."""

from __future__ import annotations

from klaw_faker.factory import Factory
from klaw_faker.generator import Generator

__all__ = ['fake']


def fake(locale: str | None = None) -> Generator:
    """Return the shared generator for ``locale``.

    Equivalent to ``Factory.make(locale)``.

    Example:
        ```python
        from klaw_faker import fake

        fake().name()
        fake('es_ES').phone_number()
        ```
    """
    return Factory.make(locale)
