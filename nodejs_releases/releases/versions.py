from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Literal


_IDENTIFIER_RE = re.compile(r"[0-9]+(\.[0-9]+)*")


def strip_version_prefix(raw: str) -> str:
    """Drop a single leading marker such as the ``v`` in ``v4.9.1``."""
    if raw and not raw[0].isdigit():
        return raw[1:]
    return raw


def is_release_identifier(version: str) -> bool:
    return _IDENTIFIER_RE.fullmatch(version) is not None


def _segments(version: str) -> tuple[int, ...]:
    return tuple(int(part) for part in version.split("."))


def compare_versions(a: str, b: str) -> Literal[-1, 0, 1]:
    """Compare dotted numeric versions segment by segment.

    Missing trailing segments count as 0, so ``"1.0"`` equals ``"1.0.0"``
    and ``"1.9.0"`` sorts before ``"1.10.0"``.

    Raises:
        ValueError: If a segment is not an integer.
    """
    left = _segments(a)
    right = _segments(b)
    width = max(len(left), len(right))
    left += (0,) * (width - len(left))
    right += (0,) * (width - len(right))
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def version_sort_key(version: str) -> tuple[tuple[int, ...], str]:
    """Chronological sort key.

    Tuple ordering of the integer segments agrees with compare_versions
    whenever it is non-zero. Its ties (``"1.0"`` vs ``"1.0.0"``) go to the
    shorter identifier, then to the raw string.
    """
    return (_segments(version), version)


def sort_versions(versions: Iterable[str]) -> list[str]:
    return sorted(versions, key=version_sort_key)
