from pydantic import BaseModel, ConfigDict, Field

from ..core.types import RGBTuple


class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    @classmethod
    def from_tuple(cls, rgb: RGBTuple) -> "Color":
        r, g, b = rgb
        return cls(r=r, g=g, b=b)

    def as_tuple(self) -> RGBTuple:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return self.hex


class PaletteEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_name: str
    color_name: str
    value: str
    color: Color


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    color: Color
    distance: float = Field(ge=0)
