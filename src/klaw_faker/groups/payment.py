"""Payment capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['PaymentGroup']


class PaymentGroup(Group):
    def credit_card_type(self) -> str:
        """Example: ``'MasterCard'``."""
        return self._faker.credit_card_provider()

    def credit_card_number(self, card_type: str | None = None) -> str:
        """Return a credit card number that passes the Luhn check.

        Args:
            card_type: Faker card type key ("visa", "mastercard", "amex", ...).
                Random if None.

        Example: ``'4485480221084675'``
        """
        return self._faker.credit_card_number(card_type)

    def credit_card_expiration_date(self, date_format: str = '%m/%y') -> str:
        """Expiration date within the next ten years, e.g. ``'04/13'``."""
        return self._faker.credit_card_expire(date_format=date_format)

    def credit_card_details(self, card_type: str | None = None) -> str:
        """Card type, holder, number, expiry and security code on separate lines."""
        return self._faker.credit_card_full(card_type)

    def iban(self) -> str:
        """Example: ``'GB82WEST12345698765432'``."""
        return self._faker.iban()

    def swift_bic_number(self) -> str:
        """Example: ``'RZTIAT22263'``."""
        return self._faker.swift()
