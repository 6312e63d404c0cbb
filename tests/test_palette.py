from __future__ import annotations

import pytest

from heypalette.color.palette_data import BRAND_PALETTE
from heypalette.color.palette_loader import Palette, build_palette, load_palette
from heypalette.core.errors import PaletteConfigError
from heypalette.models.color import Color


def test_brand_palette_loads_in_declaration_order():
    palette = load_palette()
    expected = [name for colors in BRAND_PALETTE.values() for name in colors]
    assert [e.color_name for e in palette] == expected
    assert list(palette.groups()) == list(BRAND_PALETTE)
    assert load_palette() is palette


def test_brand_palette_names_are_unique():
    names = [name for colors in BRAND_PALETTE.values() for name in colors]
    assert len(names) == len(set(names))


def test_entries_keep_stored_value():
    palette = load_palette()
    cherry = palette.get("cherry")
    assert cherry is not None
    assert cherry.group_name == "warm"
    assert cherry.value == "#c8102e"
    assert cherry.color == Color(r=200, g=16, b=46)
    assert "cherry" in palette
    assert palette.get("nope") is None


def test_palette_is_read_only():
    palette = build_palette({"reds": {"cherry": "#ff0000"}})
    with pytest.raises(TypeError):
        palette.groups()["reds"]["rose"] = palette.get("cherry")
    with pytest.raises(Exception):
        palette.entries[0].color_name = "rose"


def test_duplicate_names_across_groups_are_rejected():
    with pytest.raises(PaletteConfigError, match="Duplicate"):
        build_palette({"reds": {"cherry": "#ff0000"}, "pinks": {"cherry": "#ffc0cb"}})


def test_invalid_values_are_rejected():
    with pytest.raises(PaletteConfigError, match="reds.cherry"):
        build_palette({"reds": {"cherry": "not-a-color"}})


def test_blank_names_are_rejected():
    with pytest.raises(PaletteConfigError):
        build_palette({"reds": {" ": "#ff0000"}})
    with pytest.raises(PaletteConfigError):
        build_palette({"": {"cherry": "#ff0000"}})


def test_empty_palette():
    palette = Palette.empty()
    assert len(palette) == 0
    assert list(palette) == []
    assert dict(palette.groups()) == {}
