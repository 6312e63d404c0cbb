from __future__ import annotations

import pytest

from heypalette.color.parser import is_bare_hex, parse_color
from heypalette.core.errors import ColorParseError
from heypalette.models.color import Color


def test_hex_with_and_without_hash_are_equal():
    assert parse_color("#ff00aa") == parse_color("ff00aa") == Color(r=255, g=0, b=170)


def test_short_hex_expands_each_digit():
    assert parse_color("f0a") == parse_color("#ff00aa")
    assert parse_color("#FFF") == Color(r=255, g=255, b=255)


def test_rgb_matches_hex():
    assert parse_color("rgb(255,0,170)") == parse_color("#ff00aa")
    assert parse_color("RGB( 255 , 0 , 170 )") == parse_color("#ff00aa")


@pytest.mark.parametrize("text", ["rgba(255,0,170,0.5)", "rgba(255, 0, 170, 1)", "rgba(255,0,170,.25)", "rgba(255,0,170,50%)"])
def test_rgba_alpha_is_ignored(text):
    assert parse_color(text) == Color(r=255, g=0, b=170)


def test_surrounding_whitespace_is_trimmed():
    assert parse_color("  #00ff00\n") == Color(r=0, g=255, b=0)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "zzz",
        "#12345",
        "#1234567",
        "#ggg",
        "12",
        "rgb(999,0,0)",
        "rgb(256,0,0)",
        "rgb(-1,0,0)",
        "rgb(1.5,0,0)",
        "rgb(1,2)",
        "rgb(1,2,3,0.5)",
        "rgba(1,2,3)",
        "rgba(1,2,3,x)",
        "rgb(1,2,3",
        "hsl(0, 100%, 50%)",
    ],
)
def test_rejects_unknown_formats(text):
    with pytest.raises(ColorParseError):
        parse_color(text)


def test_parse_error_keeps_input_but_hides_grammar_from_users():
    with pytest.raises(ColorParseError) as exc_info:
        parse_color("rgb(999,0,0)")
    assert exc_info.value.value == "rgb(999,0,0)"
    assert "999" in str(exc_info.value)
    assert exc_info.value.user_message == "I only know about HEX or RGB colors sorry!"


def test_is_bare_hex():
    assert is_bare_hex("ff00aa")
    assert is_bare_hex("f0a")
    assert not is_bare_hex("#ff00aa")
    assert not is_bare_hex("rgb(1,2,3)")
