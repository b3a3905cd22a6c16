"""Barcode capability group.

The check digits are computed by Faker. ISBNs come back without separators
so that they match the plain 10 and 13 character formats.
"""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['BarcodeGroup']


class BarcodeGroup(Group):
    def ean13(self) -> str:
        """Get a random EAN-13 barcode.

        Example: ``'4006381333931'``
        """
        return self._faker.ean13()

    def ean8(self) -> str:
        """Get a random EAN-8 barcode.

        Example: ``'73513537'``
        """
        return self._faker.ean8()

    def isbn10(self) -> str:
        """Get a random ISBN-10 code. The check character may be ``X``.

        See: http://en.wikipedia.org/wiki/International_Standard_Book_Number

        Example: ``'4881416324'``
        """
        return self._faker.isbn10(separator='')

    def isbn13(self) -> str:
        """Get a random ISBN-13 code.

        See: http://en.wikipedia.org/wiki/International_Standard_Book_Number

        Example: ``'9790404436093'``
        """
        return self._faker.isbn13(separator='')
