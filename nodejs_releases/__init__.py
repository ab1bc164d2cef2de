"""Cached, chronologically sorted view of the Node.js release index."""

__version__ = "0.1.0"

from nodejs_releases.releases import (  # noqa: E402
    FetchError,
    NotPreloadedError,
    ReleaseCache,
    ReleaseRecord,
    VersionNotFoundError,
    get_release_identifiers,
    get_release_information,
    preload_node_releases,
)

__all__ = [
    "__version__",
    "FetchError",
    "NotPreloadedError",
    "ReleaseCache",
    "ReleaseRecord",
    "VersionNotFoundError",
    "get_release_identifiers",
    "get_release_information",
    "preload_node_releases",
]
