"""File capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['FileGroup']


class FileGroup(Group):
    def mime_type(self, category: str | None = None) -> str:
        """Example: ``'video/avi'``.

        Args:
            category: One of Faker's mime categories ("application", "audio",
                "image", "message", "model", "multipart", "text", "video").
        """
        return self._faker.mime_type(category)

    def file_extension(self, category: str | None = None) -> str:
        """Example: ``'avi'``."""
        return self._faker.file_extension(category)

    def file_name(self, category: str | None = None, extension: str | None = None) -> str:
        """Example: ``'report.avi'``."""
        return self._faker.file_name(category, extension)

    def file_path(
        self,
        depth: int = 1,
        category: str | None = None,
        extension: str | None = None,
    ) -> str:
        """Example: ``'/home/report.avi'``."""
        return self._faker.file_path(depth, category, extension)
