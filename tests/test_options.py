"""Tests for command-line option resolution."""

from __future__ import annotations

import pytest

from iconify.errors import ArgumentError, UsageError
from iconify.options import (
    DEFAULT,
    OUTPUT,
    default_path,
    describe,
    image_path,
    is_size_override,
    output_path,
    parse_args,
    specific,
)


class TestIsSizeOverride:
    @pytest.mark.parametrize("token", ["-16", "-16,32", "-999", "-16,,32", "-16,"])
    def test_matches(self, token):
        assert is_size_override(token)

    @pytest.mark.parametrize("token", ["-", "-,16", "-d", "--16", "16", "a-16.png", "-16a", "-1.5"])
    def test_rejects(self, token):
        assert not is_size_override(token)


class TestParseArgs:
    def test_empty(self):
        assert parse_args([]) == {}

    def test_full_example(self):
        result = parse_args(["-16,32", "a.png", "-d", "b.png", "-o", "out.ico"])
        assert result == {
            specific(16): "a.png",
            specific(32): "a.png",
            DEFAULT: "b.png",
            OUTPUT: "out.ico",
        }

    def test_bare_path_is_default(self):
        assert parse_args(["icon.png"]) == {DEFAULT: "icon.png"}

    def test_long_flags(self):
        result = parse_args(["--default", "a.png", "--output", "x.ico"])
        assert result == {DEFAULT: "a.png", OUTPUT: "x.ico"}

    def test_override_after_default(self):
        result = parse_args(["example.png", "-16", "example16px.bmp", "-o", "../out.ico"])
        assert result == {
            DEFAULT: "example.png",
            specific(16): "example16px.bmp",
            OUTPUT: "../out.ico",
        }

    def test_duplicate_size(self):
        with pytest.raises(ArgumentError, match="16"):
            parse_args(["-16", "a.png", "-16", "b.png"])

    def test_duplicate_size_in_one_token(self):
        with pytest.raises(ArgumentError, match="32"):
            parse_args(["-32,32", "a.png"])

    def test_unsupported_size(self):
        with pytest.raises(ArgumentError, match="999"):
            parse_args(["-999", "a.png"])

    def test_empty_size_component(self):
        with pytest.raises(ArgumentError, match="not a supported icon size"):
            parse_args(["-16,", "a.png"])

    def test_duplicate_default(self):
        with pytest.raises(ArgumentError, match="Default image"):
            parse_args(["a.png", "-d", "b.png"])

    def test_duplicate_output(self):
        with pytest.raises(ArgumentError, match="Output file"):
            parse_args(["-o", "a.ico", "--output", "b.ico"])

    def test_trailing_flag_is_default(self):
        assert parse_args(["-o"]) == {DEFAULT: "-o"}

    def test_flag_value_is_not_reinterpreted(self):
        assert parse_args(["-d", "-16"]) == {DEFAULT: "-16"}


class TestPaths:
    def test_output_inferred_from_default(self):
        assert output_path({DEFAULT: "img/logo.png"}) == "img/logo.ico"

    def test_output_inferred_without_extension(self):
        assert output_path({DEFAULT: "logo"}) == "logo.ico"

    def test_explicit_output_kept(self):
        assert output_path({DEFAULT: "a.png", OUTPUT: "b.bin"}) == "b.bin"

    def test_missing_default(self):
        with pytest.raises(UsageError):
            default_path({OUTPUT: "out.ico"})
        with pytest.raises(UsageError):
            output_path({})

    def test_image_path(self):
        options = {DEFAULT: "a.png", specific(16): "small.png"}
        assert image_path(options, 16) == "small.png"
        assert image_path(options, 256) == "a.png"


def test_describe():
    options = parse_args(["-256", "big.png", "a.png", "-16", "s.png", "-o", "x.ico"])
    assert describe(options) == [
        "Default: a.png",
        "Output: x.ico",
        "Size 16: s.png",
        "Size 256: big.png",
    ]
