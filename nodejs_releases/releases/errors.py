"""Error types for the release cache."""

from __future__ import annotations

from dataclasses import dataclass

from nodejs_releases.http import HttpError
from nodejs_releases.releases.model import IndexFormatError

__all__ = ["FetchError", "NotPreloadedError", "VersionNotFoundError"]


@dataclass(frozen=True, slots=True)
class FetchError:
    """The release index could not be fetched, parsed or normalized.

    Attributes:
        url: Endpoint that was requested
        cause: The underlying failure, kept as-is
    """

    url: str
    cause: HttpError | IndexFormatError

    @property
    def message(self) -> str:
        return f"Failed to fetch Node.js release information from the API: {self.url} ({self.cause})"

    @property
    def hint(self) -> str:
        return "Nothing was cached; call preload() again to retry."

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class NotPreloadedError:
    """An accessor was used before a successful preload."""

    version: str | None = None

    @property
    def message(self) -> str:
        if self.version is None:
            return "Node.js releases have not yet been fetched"
        return (
            f"Unable to get the release information for Node.js version {self.version!r} "
            "as the cache was empty"
        )

    @property
    def hint(self) -> str:
        return "Preload first, then try again."

    def __str__(self) -> str:
        return f"{self.message}. {self.hint}"


@dataclass(frozen=True, slots=True)
class VersionNotFoundError:
    """The requested version is not in the (populated) cache.

    Attributes:
        version: The identifier that was looked up
        known: Every identifier the cache holds, in chronological order
    """

    version: str
    known: tuple[str, ...]

    @property
    def message(self) -> str:
        return (
            f"Unable to find the release information for Node.js version {self.version!r} "
            f"in the cache. Version numbers that do exist are: [{', '.join(self.known)}]"
        )

    @property
    def hint(self) -> str:
        return "Check the version number is valid and try again."

    def __str__(self) -> str:
        return self.message
