"""Color capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['ColorGroup']


class ColorGroup(Group):
    def hex_color(self) -> str:
        """Example: ``'#fa3cc2'``."""
        return self._faker.hex_color()

    def safe_hex_color(self) -> str:
        """Example: ``'#ff0044'``."""
        return self._faker.safe_hex_color()

    def rgb_color(self) -> str:
        """Example: ``'0,255,122'``."""
        return self._faker.rgb_color()

    def rgb_color_as_list(self) -> list[int]:
        """Example: ``[0, 255, 122]``."""
        return [int(channel) for channel in self._faker.rgb_color().split(',')]

    def rgb_css_color(self) -> str:
        """Example: ``'rgb(0,255,122)'``."""
        return self._faker.rgb_css_color()

    def color_name(self) -> str:
        """Example: ``'Gainsbor'``."""
        return self._faker.color_name()

    def safe_color_name(self) -> str:
        """Example: ``'fuchsia'``."""
        return self._faker.safe_color_name()

    def hsl_color(self) -> str:
        """Example: ``'340,50,20'``."""
        return ','.join(str(component) for component in self._faker.color_hsl())

    def hsl_color_as_list(self) -> list[int]:
        """Example: ``[340, 50, 20]``."""
        return list(self._faker.color_hsl())
