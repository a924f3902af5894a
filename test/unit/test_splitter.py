from __future__ import annotations

import pytest

from domain.ports import SplitterPort
from domain.services import CommaDelimitedSplitter, split


def test_three_tokens_trimmed() -> None:
    splits = CommaDelimitedSplitter().split("   a    , b,    c ")
    assert splits == ["a", "b", "c"]


def test_consecutive_delimiters_skip_empty_segment() -> None:
    splits = CommaDelimitedSplitter().split("   a    ,,    c ")
    assert splits == ["a", "c"]


def test_only_delimiters_and_whitespace_yield_nothing() -> None:
    assert CommaDelimitedSplitter().split(",,, ,,    ,,  ,,") == []


def test_empty_string_yields_nothing() -> None:
    assert split("") == []


def test_long_run_of_blank_segments_yields_nothing() -> None:
    assert split("  ,, ,,, ,,,,, ,,,,,,,  ") == []


def test_single_token_without_delimiter() -> None:
    assert split("   a   ") == ["a"]


def test_inner_whitespace_is_preserved() -> None:
    assert split(" hello world ,  foo\tbar ") == ["hello world", "foo\tbar"]


def test_tabs_and_newlines_are_trimmed() -> None:
    assert split("\ta\n,\r\nb\t") == ["a", "b"]


@pytest.mark.parametrize(
    "payload",
    [
        "   a    , b,    c ",
        "x,,y,, ,z",
        " ,lead",
        "trail, ",
        "  only  ",
        ",,,,",
    ],
)
def test_tokens_are_non_empty_and_already_trimmed(payload: str) -> None:
    tokens = split(payload)
    for token in tokens:
        assert token
        assert token.strip() == token
    assert tokens == [seg.strip() for seg in payload.split(",") if seg.strip()]


def test_splitting_is_deterministic() -> None:
    payload = " q , r ,, s "
    assert split(payload) == split(payload)


def test_splitter_satisfies_port() -> None:
    splitter: SplitterPort = CommaDelimitedSplitter()
    assert isinstance(splitter, SplitterPort)
