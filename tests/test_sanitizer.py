"""Tests for input parsing and CLI validators."""

import argparse

import pytest

from chromalab.shared import sanitizer as s


def test_parse_hex_canonicalizes():
    assert s.parse_hex("#abc") == "#AABBCC"
    assert s.parse_hex("  3b82f6 ") == "#3B82F6"
    assert s.parse_hex("#3B82F6CC") == "#3B82F6"


def test_parse_hex_rejects_bad_lengths_and_characters():
    for bad in ("#ab", "#abcd", "#12345g", "", None, "#1234567"):
        assert s.parse_hex(bad) is None


def test_parse_hex_strips_a_single_hash():
    assert s.parse_hex("##FF0000") is None
    assert s.parse_hex("##abc") is None
    assert s.parse_hex("#FF0000") == "#FF0000"


def test_opaque_hex_drops_alpha():
    assert s.opaque_hex("#3B82F680") == "#3B82F6"
    assert s.opaque_hex("f0a") == "#FF00AA"


def test_parse_hex_alpha():
    assert s.parse_hex_alpha("#FF000080") == 50
    assert s.parse_hex_alpha("#FF0000FF") == 100
    assert s.parse_hex_alpha("#FF000000") == 0
    assert s.parse_hex_alpha("#FF0000") is None


def test_parse_hsl_string_wraps_hue_and_clamps():
    hsl = s.parse_hsl_string("hsl(400, 150%, 50%)")
    assert hsl.h == pytest.approx(40.0)
    assert hsl.s == 100.0
    assert hsl.l == 50.0


def test_parse_rgb_string_clamps_channels():
    assert s.parse_rgb_string("rgb(300, 0, 12.6)") == (255, 0, 13)
    assert s.parse_rgb_string("rgb(-1, 0, 0)") is None
    assert s.parse_rgb_string("hsl(1, 2%, 3%)") is None


def test_handle_hex_raises_for_invalid_value():
    assert s.handle_hex("abc") == "#AABBCC"
    with pytest.raises(argparse.ArgumentTypeError):
        s.handle_hex("xyz")


def test_handle_color_keeps_raw_value():
    assert s.handle_color("rgb(1, 2, 3)") == "rgb(1, 2, 3)"
    with pytest.raises(argparse.ArgumentTypeError):
        s.handle_color("blue-ish")


def test_range_validators_clamp():
    assert s.INPUT_HANDLERS["count"]("500") == 100
    assert s.INPUT_HANDLERS["count"]("1") == 2
    assert s.INPUT_HANDLERS["ratio"]("30") == 21.0
    assert s.INPUT_HANDLERS["intensity"]("-5") == 0
    with pytest.raises(argparse.ArgumentTypeError):
        s.INPUT_HANDLERS["steps"]("abc")


def test_name_validator_keeps_digits():
    assert s.INPUT_HANDLERS["format"]("P3") == "p3"
    assert s.INPUT_HANDLERS["colorspace"]("sRGB-Linear") == "srgblinear"
