"""Tests for releases/model.py - normalization of raw index entries."""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable

import pytest

from nodejs_releases.core.result import Err, Ok
from nodejs_releases.releases.model import IndexFormatError, ReleaseRecord, parse_index, parse_release


def _record(**overrides: object) -> ReleaseRecord:
    fields: dict[str, object] = {
        "version": "4.9.1",
        "date": dt.date(2018, 3, 29),
        "files": ["headers", "src"],
        "v8": "4.5.103.53",
        "npm": "2.15.11",
        "lts": "Argon",
    }
    fields.update(overrides)
    return ReleaseRecord(**fields)  # type: ignore[arg-type]


class TestParseRelease:
    """Tests for parse_release()."""

    def test_full_entry(self, make_entry: Callable[..., dict[str, object]]) -> None:
        entry = make_entry(
            "v16.4.0",
            "2021-06-23",
            files=["headers", "linux-arm64", "linux-arm64"],
            v8="9.1.269.36",
            npm="7.18.1",
            uv="1.41.0",
            zlib="1.2.11",
            openssl="1.1.1k+quic",
            modules="93",
            security=True,
        )

        result = parse_release(entry)

        assert result == Ok(
            ReleaseRecord(
                version="16.4.0",
                date=dt.date(2021, 6, 23),
                files=["headers", "linux-arm64", "linux-arm64"],
                v8="9.1.269.36",
                npm="7.18.1",
                uv="1.41.0",
                zlib="1.2.11",
                openssl="1.1.1k+quic",
                modules="93",
                lts=False,
                security=True,
            )
        )

    def test_absent_components_are_none(self, make_entry: Callable[..., dict[str, object]]) -> None:
        """Oldest releases ship without npm/uv/zlib/openssl/modules."""
        result = parse_release(make_entry("v0.1.14", "2009-10-30", files=["src"]))

        assert isinstance(result, Ok)
        record = result.value
        assert (record.npm, record.uv, record.zlib, record.openssl, record.modules) == (None,) * 5
        assert record.lts is False
        assert not record.is_lts

    def test_empty_v8_passes_through(self, make_entry: Callable[..., dict[str, object]]) -> None:
        """Any string is a valid v8 value, including an empty one."""
        result = parse_release(make_entry("v0.1.14", v8=""))

        assert isinstance(result, Ok)
        assert result.value.v8 == ""

    def test_unprefixed_version_kept(self, make_entry: Callable[..., dict[str, object]]) -> None:
        result = parse_release(make_entry("0.1.14"))

        assert isinstance(result, Ok)
        assert result.value.version == "0.1.14"

    def test_entry_not_mutated(self, make_entry: Callable[..., dict[str, object]]) -> None:
        entry = make_entry("v4.9.1", "2018-03-29", lts="Argon")
        snapshot = dict(entry)

        result = parse_release(entry)

        assert entry == snapshot
        assert isinstance(result, Ok)
        assert result.value.files is not entry["files"]

    @pytest.mark.parametrize(
        ("overrides", "fragment"),
        [
            ({"version": None}, "'version'"),
            ({"version": "vnext"}, "unrecognized version"),
            ({"date": "2018-13-40"}, "invalid date"),
            ({"date": 20180329}, "'date'"),
            ({"files": "src"}, "'files'"),
            ({"files": ["src", 1]}, "'files'"),
            ({"v8": None}, "'v8'"),
            ({"v8": 4}, "'v8'"),
            ({"npm": 6}, "'npm'"),
            ({"lts": True}, "'lts'"),
            ({"lts": ""}, "'lts'"),
            ({"security": "no"}, "'security'"),
        ],
    )
    def test_invalid_fields(
        self,
        make_entry: Callable[..., dict[str, object]],
        overrides: dict[str, object],
        fragment: str,
    ) -> None:
        entry = make_entry("v4.9.1")
        entry.update(overrides)

        result = parse_release(entry, position=7)

        assert isinstance(result, Err)
        assert fragment in result.error.message
        assert result.error.position == 7

    def test_not_an_object(self) -> None:
        result = parse_release(["v4.9.1"])

        assert result == Err(IndexFormatError("expected a JSON object"))


class TestParseIndex:
    """Tests for parse_index()."""

    def test_keeps_input_order(self, sample_index: list[dict[str, object]]) -> None:
        """Sorting is the cache's job; parsing preserves upstream order."""
        result = parse_index(sample_index)

        assert isinstance(result, Ok)
        assert [r.version for r in result.value][:3] == ["12.22.12", "14.0.0", "4.9.1"]

    def test_empty(self) -> None:
        assert parse_index([]) == Ok([])

    def test_not_a_list(self) -> None:
        result = parse_index({"releases": []})

        assert isinstance(result, Err)
        assert result.error.position is None

    def test_reports_position(self, make_entry: Callable[..., dict[str, object]]) -> None:
        result = parse_index([make_entry("v1.0.0"), make_entry("v1.0.1", files=None)])

        assert isinstance(result, Err)
        assert result.error.position == 1
        assert str(result.error).startswith("entry 1: ")


class TestReleaseRecord:
    """Tests for ReleaseRecord helpers."""

    def test_copy_is_independent(self) -> None:
        original = _record()

        clone = original.copy()
        clone.lts = False
        clone.files.append("win-x64-msi")

        assert clone == _record(lts=False, files=["headers", "src", "win-x64-msi"])
        assert original == _record()

    def test_is_lts(self) -> None:
        assert _record().is_lts
        assert not _record(lts=False).is_lts

    def test_to_dict(self) -> None:
        assert _record(security=True).to_dict() == {
            "version": "4.9.1",
            "date": "2018-03-29",
            "files": ["headers", "src"],
            "v8": "4.5.103.53",
            "npm": "2.15.11",
            "lts": "Argon",
            "security": True,
        }
