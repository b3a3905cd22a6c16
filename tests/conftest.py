"""Pytest configuration and shared fixtures for klaw-faker tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, settings

import klaw_faker._config
from klaw_faker import Factory, Generator, clear_log_hooks

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

# The autouse reset below is function scoped; it is safe to share across
# hypothesis examples because property tests build their own generators.
settings.register_profile(
    'klaw',
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile('klaw')


@pytest.fixture(autouse=True)
def reset_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with no configuration, no cached generators and no hooks."""
    for name in ('KLAW_FAKER_LOCALE', 'KLAW_FAKER_SEED', 'KLAW_FAKER_USE_WEIGHTING'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(klaw_faker._config, '_config', None)
    Factory.clear()
    clear_log_hooks()
    yield
    Factory.clear()
    clear_log_hooks()


@pytest.fixture
def seeded() -> Callable[..., Generator]:
    """Build private generators with a fixed seed.

    Example:
        ```python
        def test_something(self, seeded):
            assert seeded().city() == seeded().city()
        ```
    """

    def build(locale: str = 'en_US', seed: int = 1234) -> Generator:
        return Factory.create(locale, seed=seed)

    return build


@pytest.fixture
def gen() -> Generator:
    """A seeded en_US generator."""
    return Factory.create('en_US', seed=1234)
