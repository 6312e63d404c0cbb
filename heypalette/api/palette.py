import io
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from PIL import Image

from ..color.metrics import DistanceMetric, get_metric
from ..color.palette_loader import Palette, load_palette
from ..color.parser import parse_color
from ..core.display import css_variable, match_label, sentence_case, swatch_value
from ..core.errors import ColorParseError, EmptyPaletteError
from ..core.matching import MatchOutcome, parse_and_match
from ..models.api_schemas import MatchResponse, PaletteColor, PaletteGroup, PaletteResponse
from ..settings import MATCH_METRIC, SWATCH_SIZE

logger = logging.getLogger(__name__)

router = APIRouter()


def get_palette() -> Palette:
    return load_palette()


def get_active_metric() -> DistanceMetric:
    return get_metric(MATCH_METRIC)


def build_match_response(outcome: MatchOutcome) -> MatchResponse:
    result = outcome.unwrap()
    percentage = outcome.percentage
    return MatchResponse(
        query=outcome.query,
        swatch=swatch_value(outcome.query),
        name=result.name,
        value=result.value,
        css_variable=css_variable(result.name),
        distance=result.distance,
        percentage=percentage,
        label=match_label(percentage),
        metric=outcome.metric.name,
    )


# =====================================================================
#   PALETTE
# =====================================================================

@router.get("/palette", response_model=PaletteResponse)
async def list_palette(
    palette: Palette = Depends(get_palette),
    metric: DistanceMetric = Depends(get_active_metric),
):
    groups = [
        PaletteGroup(
            name=group_name,
            title=sentence_case(group_name),
            colors=[
                PaletteColor(name=name, value=entry.value, css_variable=css_variable(name))
                for name, entry in colors.items()
            ],
        )
        for group_name, colors in palette.groups().items()
    ]
    return PaletteResponse(metric=metric.name, total=len(palette), groups=groups)


# =====================================================================
#   MATCH
# =====================================================================

@router.get("/match", response_model=MatchResponse)
async def match_color(
    q: Optional[str] = Query(None, description="Hex or rgb()/rgba() color"),
    palette: Palette = Depends(get_palette),
    metric: DistanceMetric = Depends(get_active_metric),
):
    outcome = parse_and_match(q, palette, metric)
    if isinstance(outcome.error, EmptyPaletteError):
        raise HTTPException(status_code=503, detail=outcome.user_message)
    if not outcome.ok:
        raise HTTPException(status_code=400, detail=outcome.user_message)
    return build_match_response(outcome)


# =====================================================================
#   SWATCH
# =====================================================================

@router.get("/swatch")
async def swatch(
    value: str = Query(..., description="Palette color name, hex or rgb()/rgba() color"),
    size: int = Query(SWATCH_SIZE, ge=1, le=512),
    palette: Palette = Depends(get_palette),
):
    entry = palette.get(value)
    try:
        color = entry.color if entry is not None else parse_color(value)
    except ColorParseError as e:
        logger.info("Swatch rejected: %s", e)
        raise HTTPException(status_code=400, detail=e.user_message)

    buf = io.BytesIO()
    Image.new("RGB", (size, size), color.as_tuple()).save(buf, format="PNG")
    return Response(content=buf.getvalue(), media_type="image/png")
