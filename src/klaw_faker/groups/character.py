"""Character capability group: single letters and pattern-based strings."""

from __future__ import annotations

import string
from warnings import deprecated

from klaw_faker.groups._base import Group

__all__ = ['CharacterGroup']


class CharacterGroup(Group):
    def letter(self) -> str:
        """Example: ``'b'``."""
        return self._faker.random_letter()

    @deprecated('Use letter() instead')
    def random_letter(self) -> str:
        """Example: ``'b'``."""
        return self.letter()

    def lowercase_letter(self) -> str:
        """Example: ``'q'``."""
        return self._faker.random_lowercase_letter()

    def uppercase_letter(self) -> str:
        """Example: ``'Q'``."""
        return self._faker.random_uppercase_letter()

    def lexify(self, text: str = '????', letters: str = string.ascii_letters) -> str:
        """Replace every ``?`` in ``text`` with a random letter from ``letters``.

        Example: ``lexify('Hello ??')`` -> ``'Hello Xv'``
        """
        return self._faker.lexify(text, letters)

    def numerify(self, text: str = '###') -> str:
        """Replace ``#`` with a digit and ``%`` with a non-zero digit.

        ``!`` and ``@`` are replaced with a digit (or nothing) and a non-zero
        digit (or nothing) respectively.

        Example: ``numerify('Hello ###')`` -> ``'Hello 609'``
        """
        return self._faker.numerify(text)

    def bothify(self, text: str = '## ??', letters: str = string.ascii_letters) -> str:
        """Apply both numerify() and lexify() to ``text``.

        Example: ``bothify('Hello ##??')`` -> ``'Hello 42jz'``
        """
        return self._faker.bothify(text, letters)

    def hexify(self, text: str = '^^^^', upper: bool = False) -> str:
        """Replace every ``^`` in ``text`` with a random hex digit.

        Example: ``hexify('MAC ^^:^^')`` -> ``'MAC 3f:a0'``
        """
        return self._faker.hexify(text, upper)
