"""Release records and normalization of raw index entries.

The upstream index is a JSON array of objects like:

    {"version": "v4.9.1", "date": "2018-03-29", "files": ["headers", ...],
     "npm": "2.15.11", "v8": "4.5.103.53", "uv": "1.9.1", "zlib": "1.2.11",
     "openssl": "1.0.2o", "modules": "46", "lts": "Argon", "security": true}

Each entry becomes a new ReleaseRecord; the parsed JSON is never mutated.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, replace
from typing import Literal

from nodejs_releases.core.result import Err, Ok, Result
from nodejs_releases.core.structured import StrDict, as_obj_list, as_str_dict, as_str_list
from nodejs_releases.releases.versions import is_release_identifier, strip_version_prefix

__all__ = [
    "ReleaseRecord",
    "IndexFormatError",
    "parse_release",
    "parse_index",
]

_OPTIONAL_COMPONENTS = ("npm", "uv", "zlib", "openssl", "modules")


@dataclass(frozen=True, slots=True)
class IndexFormatError:
    """A release index entry (or the index itself) had an unexpected shape.

    Attributes:
        message: What was wrong
        position: Index of the offending entry, None when the whole body is bad
    """

    message: str
    position: int | None = None

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"entry {self.position}: {self.message}"


@dataclass(slots=True)
class ReleaseRecord:
    """Metadata of one Node.js release.

    Attributes:
        version: Release identifier without prefix (e.g. "4.9.1")
        date: Release date
        files: Distributed artifacts, in upstream order (e.g. ["headers", "linux-x64"])
        v8: Bundled V8 version
        npm: Bundled npm version, None when not shipped
        uv: Bundled libuv version
        zlib: Bundled zlib version
        openssl: Bundled OpenSSL version
        modules: Native module ABI version (e.g. "93")
        lts: LTS codename (e.g. "Argon"), or False when not an LTS release
        security: Security release flag, carried as received
    """

    version: str
    date: dt.date
    files: list[str]
    v8: str
    npm: str | None = None
    uv: str | None = None
    zlib: str | None = None
    openssl: str | None = None
    modules: str | None = None
    lts: str | Literal[False] = False
    security: bool = False

    @property
    def is_lts(self) -> bool:
        return self.lts is not False

    def copy(self) -> ReleaseRecord:
        """Return a copy safe to hand to callers.

        Scalar fields are shared (they are immutable); ``files`` is a new list.
        """
        return replace(self, files=list(self.files))

    def to_dict(self) -> dict[str, object]:
        """JSON friendly view: ISO date, absent components omitted."""
        out: dict[str, object] = {
            "version": self.version,
            "date": self.date.isoformat(),
            "files": list(self.files),
            "v8": self.v8,
        }
        for name in _OPTIONAL_COMPONENTS:
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        out["lts"] = self.lts
        out["security"] = self.security
        return out


def _required_str(entry: StrDict, key: str) -> str | None:
    value = entry.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def parse_release(entry: object, position: int | None = None) -> Result[ReleaseRecord, IndexFormatError]:
    """Normalize one raw index entry into a ReleaseRecord.

    - ``version`` loses its leading marker ("v4.9.1" -> "4.9.1")
    - ``date`` becomes a ``datetime.date``
    - everything else is carried over, with type checks
    """
    data = as_str_dict(entry)
    if data is None:
        return Err(IndexFormatError("expected a JSON object", position))

    raw_version = _required_str(data, "version")
    if raw_version is None:
        return Err(IndexFormatError("missing or invalid 'version'", position))
    version = strip_version_prefix(raw_version)
    if not is_release_identifier(version):
        return Err(IndexFormatError(f"unrecognized version {raw_version!r}", position))

    raw_date = _required_str(data, "date")
    if raw_date is None:
        return Err(IndexFormatError(f"{version}: missing or invalid 'date'", position))
    try:
        date = dt.date.fromisoformat(raw_date)
    except ValueError:
        return Err(IndexFormatError(f"{version}: invalid date {raw_date!r}", position))

    files = as_str_list(data.get("files"))
    if files is None:
        return Err(IndexFormatError(f"{version}: 'files' must be a list of strings", position))

    v8 = data.get("v8")
    if not isinstance(v8, str):
        return Err(IndexFormatError(f"{version}: 'v8' must be a string", position))

    components: dict[str, str | None] = {}
    for name in _OPTIONAL_COMPONENTS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            return Err(IndexFormatError(f"{version}: '{name}' must be a string", position))
        components[name] = value

    lts = data.get("lts", False)
    if lts is not False and not (isinstance(lts, str) and lts):
        return Err(IndexFormatError(f"{version}: 'lts' must be false or a codename", position))

    security = data.get("security", False)
    if not isinstance(security, bool):
        return Err(IndexFormatError(f"{version}: 'security' must be a boolean", position))

    return Ok(
        ReleaseRecord(
            version=version,
            date=date,
            files=files,
            v8=v8,
            npm=components["npm"],
            uv=components["uv"],
            zlib=components["zlib"],
            openssl=components["openssl"],
            modules=components["modules"],
            lts=lts,
            security=security,
        )
    )


def parse_index(data: object) -> Result[list[ReleaseRecord], IndexFormatError]:
    """Normalize the whole index body. Fails on the first bad entry."""
    entries = as_obj_list(data)
    if entries is None:
        return Err(IndexFormatError("expected a JSON array of releases"))

    records: list[ReleaseRecord] = []
    for position, entry in enumerate(entries):
        result = parse_release(entry, position)
        if isinstance(result, Err):
            return result
        records.append(result.value)
    return Ok(records)
