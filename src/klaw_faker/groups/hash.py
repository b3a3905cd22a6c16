"""Hash capability group. All digests are lowercase hex strings."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['HashGroup']


class HashGroup(Group):
    def md5(self) -> str:
        """Example: ``'de99a620c50f2990e87144735cd357e7'``."""
        return self._faker.md5(raw_output=False)

    def sha1(self) -> str:
        """Example: ``'f08e7f04ca1a413807ebc47551a40a20a0b4de5c'``."""
        return self._faker.sha1(raw_output=False)

    def sha256(self) -> str:
        """Example: ``'0061e4c60dac5c1d82db0135a42e00c89ae3a333e7c26485321f24348c7e98a5'``."""
        return self._faker.sha256(raw_output=False)
