from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import conversion, health, pages
from .core.config import settings

logger = logging.getLogger("table_csv.backend")
logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")

app = FastAPI(title=settings.app_name)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pages.router)
app.include_router(health.router, prefix="/api")
app.include_router(conversion.router, prefix="/api")


def run() -> None:
    """Serve the application on 0.0.0.0:8080."""

    logger.info("Starting %s (%s)", settings.app_name, settings.environment)
    uvicorn.run(app, host="0.0.0.0", port=8080)


if __name__ == "__main__":
    run()


__all__ = ["app", "run"]
