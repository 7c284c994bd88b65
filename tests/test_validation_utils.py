"""Tests for the shared URL parsing helpers (utils/validation.py)."""

from __future__ import annotations

import pytest

from vidkit.utils.validation import (
    URLParseError,
    coerce_scheme,
    has_scheme,
    parse_url,
    strip_www,
    try_parse_url,
)


class TestSchemeHandling:
    @pytest.mark.parametrize("url", ["https://youtube.com", "http://youtube.com", "HTTPS://youtube.com"])
    def test_has_scheme(self, url: str) -> None:
        assert has_scheme(url)

    @pytest.mark.parametrize("url", ["youtube.com", "ftp://youtube.com", "httpyoutube.com"])
    def test_missing_scheme(self, url: str) -> None:
        assert not has_scheme(url)

    def test_coerce_prepends_https_and_trims(self) -> None:
        assert coerce_scheme("  youtu.be/abc  ") == "https://youtu.be/abc"

    def test_coerce_keeps_existing_scheme(self) -> None:
        assert coerce_scheme("http://youtu.be/abc") == "http://youtu.be/abc"

    def test_coerce_rejects_when_protocol_required(self) -> None:
        with pytest.raises(URLParseError):
            coerce_scheme("youtu.be/abc", allow_no_protocol=False)


class TestStripWww:
    def test_strips_single_leading_www(self) -> None:
        assert strip_www("WWW.YouTube.com") == "youtube.com"

    def test_leaves_other_subdomains(self) -> None:
        assert strip_www("music.youtube.com") == "music.youtube.com"

    def test_only_strips_prefix(self) -> None:
        assert strip_www("notwww.example.com") == "notwww.example.com"


class TestParseUrl:
    def test_decomposes_url(self) -> None:
        parsed = parse_url("https://www.YouTube.com/watch?v=abc&t=1&v=def")

        assert parsed.scheme == "https"
        assert parsed.raw_hostname == "www.youtube.com"
        assert parsed.hostname == "youtube.com"
        assert parsed.path == "/watch"
        assert parsed.query_keys == ["v", "t", "v"]

    def test_first_param_and_last_wins_mapping(self) -> None:
        parsed = parse_url("youtube.com/watch?v=abc&v=def")

        assert parsed.first_param("v") == "abc"
        assert parsed.parameters == {"v": "def"}
        assert parsed.first_param("missing") is None

    def test_blank_values_are_kept(self) -> None:
        parsed = parse_url("https://youtube.com/watch?v=")
        assert parsed.query_pairs == (("v", ""),)

    def test_empty_path_becomes_root(self) -> None:
        assert parse_url("youtube.com").path == "/"

    def test_segments_drop_empty_entries(self) -> None:
        parsed = parse_url("https://tiktok.com//@user/video/1/")
        assert parsed.path_segments == ["@user", "video", "1"]
        assert parsed.trimmed_path == "@user/video/1"

    @pytest.mark.parametrize(
        "url",
        ["", "   ", None, 123, "https://", "http://", "https://bad host.com/x", "https://youtube.com:port/x"],
    )
    def test_rejects_malformed_input(self, url: object) -> None:
        with pytest.raises(URLParseError):
            parse_url(url)

    def test_try_parse_returns_none(self) -> None:
        assert try_parse_url("https://") is None
        assert try_parse_url("youtube.com", allow_no_protocol=False) is None
        assert try_parse_url("youtube.com") is not None

    def test_backslash_before_query_is_a_path_separator(self) -> None:
        parsed = parse_url("https://evil.com\\@www.youtube.com/watch?v=dQw4w9WgXcQ")
        assert parsed.hostname == "evil.com"
        assert parsed.path == "/@www.youtube.com/watch"

    def test_backslash_inside_query_is_kept(self) -> None:
        parsed = parse_url("https://youtube.com/watch?q=a\\b")
        assert parsed.first_param("q") == "a\\b"

    def test_percent_encoded_host_is_decoded(self) -> None:
        parsed = parse_url("https://WWW.You%74ube.com/watch")
        assert parsed.raw_hostname == "www.youtube.com"
        assert parsed.hostname == "youtube.com"

    @pytest.mark.parametrize("url", ["https://you%zzube.com", "https://you%2Ftube.com/x", "https://you%20tube.com"])
    def test_rejects_undecodable_or_unsafe_encoded_host(self, url: str) -> None:
        with pytest.raises(URLParseError):
            parse_url(url)
