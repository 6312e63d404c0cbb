"""Error taxonomy for palette lookups."""

from __future__ import annotations


class PaletteError(ValueError):
    user_message = "Something went wrong matching that color."


class EmptyInputError(PaletteError):
    user_message = "Maybe enter something first?"

    def __init__(self) -> None:
        super().__init__("No color value provided")


class ColorParseError(PaletteError):
    # Grammar details stay in the exception text; users only see user_message.
    user_message = "I only know about HEX or RGB colors sorry!"

    def __init__(self, value: str, reason: str = "unrecognised color format") -> None:
        super().__init__(f"{reason}: {value!r}")
        self.value = value
        self.reason = reason


class EmptyPaletteError(PaletteError):
    user_message = "The palette is not configured."

    def __init__(self) -> None:
        super().__init__("Palette contains no entries")


class PaletteConfigError(PaletteError):
    """Raised while building a palette from malformed static data."""


__all__ = [
    "PaletteError",
    "EmptyInputError",
    "ColorParseError",
    "EmptyPaletteError",
    "PaletteConfigError",
]
