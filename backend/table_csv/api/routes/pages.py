"""Landing page and static assets."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.templating import Jinja2Templates

from table_csv.api.deps import get_app_settings
from table_csv.core.config import Settings

_PACKAGE_DIR = Path(__file__).resolve().parents[2]
TEMPLATES_DIR = _PACKAGE_DIR / "templates"
FAVICON_PATH = _PACKAGE_DIR / "assets" / "favicon.svg"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
def index(request: Request, settings: Settings = Depends(get_app_settings)) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"app_name": settings.app_name, "endpoint": "/api/html"},
    )


@router.get("/favicon.ico")
def favicon() -> FileResponse:
    if not FAVICON_PATH.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(FAVICON_PATH, media_type="image/svg+xml")
