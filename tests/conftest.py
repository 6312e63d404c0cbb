from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from heypalette.api.palette import get_palette
from heypalette.color.palette_loader import build_palette
from heypalette.main import app

SCENARIO_PALETTE = {
    "reds": {"cherry": "#ff0000"},
    "blues": {"sky": "#0000ff"},
}


@pytest.fixture
def scenario_palette():
    return build_palette(SCENARIO_PALETTE)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def scenario_client(scenario_palette):
    app.dependency_overrides[get_palette] = lambda: scenario_palette
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
