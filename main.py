"""Auth Demo ASGI entrypoint (FastAPI + HTMX).

Run with ``uvicorn main:app --reload`` or ``python main.py``.
"""

from __future__ import annotations

import logging

from decouple import config

from src.authdemo.core.config import LOG_LEVEL
from src.authdemo.main import app

__all__ = ["app"]


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "main:app",
        host=config("HOST", default="127.0.0.1"),
        port=config("PORT", default=8000, cast=int),
        log_level=LOG_LEVEL.lower(),
    )
