"""User agent capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['UserAgentGroup']


class UserAgentGroup(Group):
    def user_agent(self) -> str:
        """Example: ``'Mozilla/5.0 (Windows CE) AppleWebKit/5350 (KHTML, like Gecko) Chrome/13.0.888.0 Safari/5350'``."""
        return self._faker.user_agent()

    def chrome(self) -> str:
        return self._faker.chrome()

    def firefox(self) -> str:
        return self._faker.firefox()

    def safari(self) -> str:
        return self._faker.safari()

    def opera(self) -> str:
        return self._faker.opera()

    def internet_explorer(self) -> str:
        return self._faker.internet_explorer()
