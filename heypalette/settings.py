import os
from pathlib import Path

MATCH_METRIC = os.getenv("MATCH_METRIC", "euclidean")  # 'euclidean', 'weighted' or 'cie76'
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
TEMPLATES_DIR = os.getenv("TEMPLATES_DIR", str(Path(__file__).resolve().parent / "templates"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
SWATCH_SIZE = int(os.getenv("SWATCH_SIZE", "64"))
