"""Shared fixtures: a small release index served by MockHttpClient."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from nodejs_releases.core.config import RELEASE_INDEX_URL
from nodejs_releases.http import MockHttpClient


def release_entry(version: str, date: str = "2020-01-01", **fields: object) -> dict[str, object]:
    """Build one raw index entry the way nodejs.org serves it."""
    entry: dict[str, object] = {
        "version": version,
        "date": date,
        "files": ["headers", "linux-x64", "src"],
        "v8": "7.8.279.23",
        "lts": False,
        "security": False,
    }
    entry.update(fields)
    return entry


@pytest.fixture
def sample_index() -> list[dict[str, object]]:
    """Newest first, as upstream orders it, with a hotfix backport mixed in."""
    return [
        release_entry("v12.22.12", "2022-04-05", npm="6.14.16", lts="Erbium", security=True),
        release_entry("v14.0.0", "2020-04-21", npm="6.14.4", modules="83"),
        release_entry("v4.9.1", "2018-03-29", v8="4.5.103.53", npm="2.15.11", lts="Argon"),
        release_entry("v1.10.0", "2015-05-29"),
        release_entry("v1.9.0", "2015-05-04"),
        release_entry("v1.0.0", "2015-01-14"),
        release_entry("v0.1.14", "2009-10-30", files=["src"]),
        release_entry("v0.1.1", "2009-06-20", files=["src", "src"]),
        release_entry("v0.1.0", "2009-05-27", files=[]),
    ]


@pytest.fixture
def mock_http(sample_index: list[dict[str, object]]) -> MockHttpClient:
    client = MockHttpClient()
    client.set_json(RELEASE_INDEX_URL, sample_index)
    return client


@pytest.fixture
def make_entry() -> Callable[..., dict[str, object]]:
    return release_entry
