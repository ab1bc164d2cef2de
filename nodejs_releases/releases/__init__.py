"""Node.js release index: records, ordering and the populate-once cache.

Besides the ReleaseCache class, this package exposes a module-level API
backed by one shared cache for the whole process:

    from nodejs_releases.releases import preload_node_releases, get_release_information

    preload_node_releases().unwrap()  # raises ValueError on FetchError
    info = get_release_information("4.9.1").unwrap()
"""

from __future__ import annotations

import threading

from nodejs_releases.core.result import Result
from nodejs_releases.http import RealHttpClient
from nodejs_releases.releases.cache import ReleaseCache, VersionInput
from nodejs_releases.releases.errors import FetchError, NotPreloadedError, VersionNotFoundError
from nodejs_releases.releases.model import IndexFormatError, ReleaseRecord, parse_index, parse_release
from nodejs_releases.releases.versions import compare_versions, sort_versions, version_sort_key

__all__ = [
    # cache
    "ReleaseCache",
    "VersionInput",
    "default_cache",
    "preload_node_releases",
    "get_release_identifiers",
    "get_release_information",
    # errors
    "FetchError",
    "NotPreloadedError",
    "VersionNotFoundError",
    "IndexFormatError",
    # model
    "ReleaseRecord",
    "parse_index",
    "parse_release",
    # versions
    "compare_versions",
    "sort_versions",
    "version_sort_key",
]

_default_cache: ReleaseCache | None = None
_default_cache_lock = threading.Lock()


def default_cache() -> ReleaseCache:
    """Return the process-wide cache, creating it on first use."""
    global _default_cache
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = ReleaseCache(RealHttpClient())
        return _default_cache


def preload_node_releases() -> Result[None, FetchError]:
    return default_cache().preload()


def get_release_identifiers() -> Result[list[str], NotPreloadedError]:
    return default_cache().list()


def get_release_information(
    version: VersionInput,
) -> Result[ReleaseRecord, NotPreloadedError | VersionNotFoundError]:
    return default_cache().get(version)
