"""The typed generator facade.

Example:
    ```python
    from klaw_faker import Factory

    gen = Factory.create('fr_FR', seed=42)
    gen.city()  # a French city name
    gen.words(3)  # a list of three words
    gen.words(3, as_text=True)  # the same shape joined by spaces
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from klaw_faker.groups import (
    AddressGroup,
    BarcodeGroup,
    BloodGroup,
    BooleanGroup,
    CharacterGroup,
    ColorGroup,
    CompanyGroup,
    DecimalGroup,
    DigitGroup,
    FileGroup,
    HashGroup,
    IntegerGroup,
    InternetGroup,
    IsoCodeGroup,
    PaymentGroup,
    PersonGroup,
    PhoneGroup,
    TextGroup,
    TimeGroup,
    UserAgentGroup,
    UuidGroup,
    VersionGroup,
)

if TYPE_CHECKING:
    from faker import Faker

__all__ = ['Generator']


class Generator(
    AddressGroup,
    BarcodeGroup,
    BloodGroup,
    BooleanGroup,
    CharacterGroup,
    ColorGroup,
    CompanyGroup,
    DecimalGroup,
    DigitGroup,
    FileGroup,
    HashGroup,
    IntegerGroup,
    InternetGroup,
    IsoCodeGroup,
    PaymentGroup,
    PersonGroup,
    PhoneGroup,
    TextGroup,
    TimeGroup,
    UserAgentGroup,
    UuidGroup,
    VersionGroup,
):
    """Typed facade over one Faker engine bound to one locale.

    Each method forwards to the engine and narrows the result to its declared
    type. Engine errors propagate unchanged. Build instances through
    :class:`klaw_faker.Factory` (or :func:`klaw_faker.fake`) rather than
    directly, so the locale is validated and the engine seeded.

    Attributes:
        locale: The normalized locale identifier the engine was built for.
        faker: The wrapped Faker engine.
    """

    def __init__(self, faker: Faker, locale: str) -> None:
        self._faker = faker
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def faker(self) -> Faker:
        return self._faker

    def seed(self, value: int | None = None) -> None:
        """Reseed this generator's random stream.

        Args:
            value: Seed value. None reseeds from OS entropy.
        """
        self._faker.seed_instance(value)

    def __repr__(self) -> str:
        return f'Generator(locale={self._locale!r})'
