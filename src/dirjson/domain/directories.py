"""Directory categories — symbolic names for per-user storage locations."""

from __future__ import annotations

from enum import StrEnum

from dirjson.domain.errors import DirectoryResolutionFailed


class Directory(StrEnum):
    """Platform-standard storage locations a file can live in."""

    DOCUMENTS = "documents"
    APPLICATION_SUPPORT = "application-support"
    CACHES = "caches"
    CONFIG = "config"
    STATE = "state"
    LOGS = "logs"
    DOWNLOADS = "downloads"
    DESKTOP = "desktop"
    PICTURES = "pictures"
    MUSIC = "music"
    VIDEOS = "videos"


# Categories whose location is namespaced by the configured app name.
APP_SCOPED = frozenset(
    {
        Directory.APPLICATION_SUPPORT,
        Directory.CACHES,
        Directory.CONFIG,
        Directory.STATE,
        Directory.LOGS,
    }
)


def coerce_directory(category: Directory | str) -> Directory:
    """Return *category* as a :class:`Directory` member.

    Raises:
        DirectoryResolutionFailed: *category* names no known directory.
    """
    if isinstance(category, Directory):
        return category
    try:
        return Directory(category)
    except ValueError as exc:
        raise DirectoryResolutionFailed(category) from exc
