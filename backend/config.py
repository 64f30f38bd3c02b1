"""
Environment configuration.

Values come from the process environment, optionally seeded from a .env file.
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _get_origins() -> List[str]:
    # Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        return [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    # sensible defaults for local dev
    return [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

CORS_ALLOWED_ORIGINS = _get_origins()
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "").lower() in ("1", "true", "yes")
PORT = _get_int("PORT", 5000)

FRAME_WIDTH = _get_int("FRAME_WIDTH", 400)
FRAME_HEIGHT = _get_int("FRAME_HEIGHT", 400)
VIDEO_FPS = _get_int("VIDEO_FPS", 5)
MAX_FRAME_SIZE = _get_int("MAX_FRAME_SIZE", 2000)

MAX_SESSIONS = _get_int("MAX_SESSIONS", 100)
