"""Version capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['PRE_RELEASE_IDENTIFIERS', 'VersionGroup']

PRE_RELEASE_IDENTIFIERS = ('alpha', 'beta', 'dev', 'rc')


class VersionGroup(Group):
    def semver(self, pre_release: bool = False, build: bool = False) -> str:
        """Return a semantic version string.

        Args:
            pre_release: Allow a pre-release suffix such as ``-beta.3``.
            build: Allow build metadata such as ``+5a9b0c2``.

        Each allowed suffix is added with a 50% chance.

        Example: ``'0.14.7-rc.2+9f3d1e0'``
        """
        version = f'{self._faker.random_int(0, 9)}.{self._faker.random_int(0, 99)}.{self._faker.random_int(0, 99)}'
        if pre_release and self._faker.boolean():
            version += f'-{self._faker.random_element(PRE_RELEASE_IDENTIFIERS)}'
            if self._faker.boolean():
                version += f'.{self._faker.random_int(1, 99)}'
        if build and self._faker.boolean():
            version += f'+{self._faker.hexify("^^^^^^^")}'
        return version
