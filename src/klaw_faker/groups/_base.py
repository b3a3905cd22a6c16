"""Shared state and helpers for capability groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from faker import Faker

__all__ = ['Group', 'draw_float']

# Upper bound of the integer draw that draw_float() scales into a range.
RAND_MAX = 2**31 - 1


class Group:
    """Base for capability groups.

    A group carries no state of its own. Every method reads the engine that
    the concrete generator stores in ``_faker`` and the locale in ``_locale``.
    """

    _faker: Faker
    _locale: str


def draw_float(
    faker: Faker,
    nb_max_decimals: int | None,
    low: float,
    high: float | None,
) -> float:
    """Draw a float in ``[low, high]`` rounded to ``nb_max_decimals`` places.

    A missing ``nb_max_decimals`` is drawn as a random digit and a missing
    ``high`` as a random number, not below ``low``. Reversed bounds are
    swapped. Every draw goes through the engine so the result follows its seed.
    """
    decimals = faker.random_digit() if nb_max_decimals is None else nb_max_decimals
    if high is None:
        high = max(low, faker.random_number())
    if low > high:
        low, high = high, low

    value = round(low + faker.random_int(0, RAND_MAX) / RAND_MAX * (high - low), decimals)
    return float(min(max(value, low), high))
