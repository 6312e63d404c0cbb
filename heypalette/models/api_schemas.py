from typing import List

from pydantic import BaseModel, Field


class PaletteColor(BaseModel):
    name: str
    value: str
    css_variable: str


class PaletteGroup(BaseModel):
    name: str
    title: str
    colors: List[PaletteColor]


class PaletteResponse(BaseModel):
    metric: str
    total: int
    groups: List[PaletteGroup]


class MatchResponse(BaseModel):
    query: str
    swatch: str
    name: str
    value: str
    css_variable: str
    distance: float = Field(..., ge=0)
    percentage: float = Field(..., ge=0, le=100)
    label: str
    metric: str
