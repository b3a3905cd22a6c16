"""UUID capability group."""

from __future__ import annotations

from warnings import deprecated

from klaw_faker.groups._base import Group

__all__ = ['UuidGroup']


class UuidGroup(Group):
    def uuid(self) -> str:
        """Random RFC 4122 version 4 UUID, e.g. ``'7e57d004-2b97-4e7a-b45f-5387367791cd'``."""
        return self._faker.uuid4()

    @deprecated('Use uuid() instead')
    def uuid4(self) -> str:
        """Random RFC 4122 version 4 UUID."""
        return self.uuid()
