"""In-memory cache of the Node.js release index.

The cache starts empty and is filled once by a successful preload(). After
that it never changes: no refresh, no eviction. Readers always get copies,
so nothing a caller does can alter the cached data.

Usage:
    cache = ReleaseCache(RealHttpClient())
    match cache.preload():
        case Err(error):
            print(error.message)
        case Ok(_):
            print(cache.get("4.9.1").unwrap().lts)  # "Argon"
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nodejs_releases.core.config import RELEASE_INDEX_URL
from nodejs_releases.core.result import Err, Ok, Result
from nodejs_releases.releases.errors import FetchError, NotPreloadedError, VersionNotFoundError
from nodejs_releases.releases.model import ReleaseRecord, parse_index
from nodejs_releases.releases.versions import version_sort_key

if TYPE_CHECKING:
    from nodejs_releases.http import HttpClient

__all__ = ["ReleaseCache", "VersionInput"]

type VersionInput = str | int | float


@dataclass(frozen=True, slots=True)
class _Snapshot:
    by_version: dict[str, ReleaseRecord]
    identifiers: tuple[str, ...]


def _build_snapshot(records: list[ReleaseRecord]) -> _Snapshot:
    by_version: dict[str, ReleaseRecord] = {}
    for record in sorted(records, key=lambda r: version_sort_key(r.version)):
        # first occurrence of a duplicated version wins
        by_version.setdefault(record.version, record)
    return _Snapshot(by_version=by_version, identifiers=tuple(by_version))


def _coerce_version(version: VersionInput) -> str:
    if isinstance(version, float) and version.is_integer():
        return str(int(version))
    return str(version)


class ReleaseCache:
    """Chronologically ordered, populate-once cache of release records.

    Args:
        http: Client used for the single index request
        url: Release index endpoint
    """

    def __init__(self, http: HttpClient, url: str = RELEASE_INDEX_URL) -> None:
        self._http = http
        self._url = url
        self._snapshot: _Snapshot | None = None
        self._preload_lock = threading.Lock()

    @property
    def url(self) -> str:
        return self._url

    @property
    def is_populated(self) -> bool:
        return self._snapshot is not None

    def __len__(self) -> int:
        snapshot = self._snapshot
        return 0 if snapshot is None else len(snapshot.identifiers)

    def __contains__(self, version: object) -> bool:
        snapshot = self._snapshot
        if snapshot is None or not isinstance(version, str | int | float):
            return False
        return _coerce_version(version) in snapshot.by_version

    def preload(self) -> Result[None, FetchError]:
        """Fetch, normalize, sort and store the release index.

        Once populated this returns Ok immediately without touching the
        network. Concurrent first calls are serialized: the later caller
        waits and then finds the cache filled.

        Returns:
            Ok(None), or Err(FetchError) with the cache left empty
        """
        if self._snapshot is not None:
            return Ok(None)

        with self._preload_lock:
            if self._snapshot is not None:
                return Ok(None)

            result = self._http.get_json(self._url).flat_map(parse_index)
            if isinstance(result, Err):
                return result.map_err(lambda cause: FetchError(url=self._url, cause=cause))

            # an empty index leaves the cache empty, so the next call fetches again
            if result.value:
                self._snapshot = _build_snapshot(result.value)
            return Ok(None)

    def get(self, version: VersionInput) -> Result[ReleaseRecord, NotPreloadedError | VersionNotFoundError]:
        """Look up the release information for an exact version.

        Numbers are stringified first (``4`` looks up ``"4"``); there is no
        partial or fuzzy matching.

        Returns:
            Ok with a fresh copy of the record, or Err when the cache is empty
            or does not know the version
        """
        key = _coerce_version(version)
        snapshot = self._snapshot
        if snapshot is None:
            return Err(NotPreloadedError(version=key))

        record = snapshot.by_version.get(key)
        if record is None:
            return Err(VersionNotFoundError(version=key, known=snapshot.identifiers))
        return Ok(record.copy())

    def list(self) -> Result[list[str], NotPreloadedError]:
        """Return all known versions, oldest first, as a new list."""
        snapshot = self._snapshot
        if snapshot is None:
            return Err(NotPreloadedError())
        return Ok(list(snapshot.identifiers))
