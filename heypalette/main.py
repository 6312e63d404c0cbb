import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .api.palette import build_match_response, get_active_metric, get_palette
from .api.palette import router as palette_router
from .color.metrics import DistanceMetric
from .color.palette_loader import Palette, load_palette
from .core.display import css_variable, sentence_case
from .core.errors import EmptyPaletteError
from .core.matching import parse_and_match
from .settings import CORS_ORIGINS, LOG_LEVEL, TEMPLATES_DIR

logging.basicConfig(level=LOG_LEVEL.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    palette = load_palette()
    if not len(palette):
        logger.error("Refusing to start: palette has no entries")
        raise EmptyPaletteError()
    metric = get_active_metric()
    logger.info("Loaded %r, matching with %s", palette, metric.name)
    yield


app = FastAPI(title="Hey Palette", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(palette_router, prefix="/api/v1", tags=["palette"])

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.filters["sentence_case"] = sentence_case
templates.env.filters["css_variable"] = css_variable


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    q: Optional[str] = None,
    palette: Palette = Depends(get_palette),
    metric: DistanceMetric = Depends(get_active_metric),
):
    context = {"palette": palette.groups(), "query": q or "", "result": None, "error": None}

    # A bare visit shows the palette; only a submitted form is validated.
    if q is not None:
        outcome = parse_and_match(q, palette, metric)
        if outcome.ok:
            context["result"] = build_match_response(outcome)
        else:
            context["error"] = outcome.user_message

    return templates.TemplateResponse(request, "index.html", context)
