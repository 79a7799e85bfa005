"""Common dependency functions for API routes."""

import logging
from typing import Generator

from fastapi import Depends

from table_csv.core.config import Settings, get_settings
from table_csv.services.converter import HtmlTableConverter


def get_app_settings() -> Generator:
    yield get_settings()


def get_converter(settings: Settings = Depends(get_app_settings)) -> HtmlTableConverter:
    return HtmlTableConverter(
        parser=settings.html_parser,
        cell_text=settings.cell_text,
        strip_cells=settings.strip_cells,
        line_terminator=settings.line_terminator,
        log=logging.getLogger("table_csv.converter"),
    )
