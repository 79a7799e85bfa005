"""Endpoints converting posted HTML into CSV."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from table_csv.api.deps import get_app_settings, get_converter
from table_csv.core.config import Settings
from table_csv.exceptions import EncodeError, NoTableError, ParseError, PayloadDecodeError
from table_csv.payload import decode_form_payload
from table_csv.schemas.conversion import ErrorResponse
from table_csv.services.converter import ConversionResult, HtmlTableConverter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/html", tags=["conversion"])

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


async def _read_html(request: Request) -> str:
    body = await request.body()
    try:
        return decode_form_payload(body)
    except PayloadDecodeError as exc:
        logger.warning("Error decoding content: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _convert(converter: HtmlTableConverter, html: str) -> ConversionResult:
    try:
        result = converter.convert(html)
    except (ParseError, NoTableError) as exc:
        logger.warning("Conversion rejected: %s", exc.message)
        raise HTTPException(status_code=400, detail=exc.message) from exc
    except EncodeError as exc:
        logger.error("CSV encoding failed: %s", exc.message)
        raise HTTPException(status_code=500, detail=exc.message) from exc
    logger.info("Conversion completed: %s rows, %s columns", result.row_count, result.column_count)
    return result


@router.post("", response_model=str, responses=_ERROR_RESPONSES)
async def convert_html(
    request: Request,
    converter: HtmlTableConverter = Depends(get_converter),
) -> str:
    """Return the first table of the posted markup as a CSV string."""

    html = await _read_html(request)
    return _convert(converter, html).csv_text


@router.post("/download", response_class=Response, responses=_ERROR_RESPONSES)
async def download_csv(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    converter: HtmlTableConverter = Depends(get_converter),
) -> Response:
    """Return the first table of the posted markup as a CSV attachment."""

    html = await _read_html(request)
    result = _convert(converter, html)
    headers = {
        "Content-Disposition": f'attachment; filename="{settings.download_filename}.csv"',
        "X-Row-Count": str(result.row_count),
        "X-Column-Count": str(result.column_count),
    }
    return Response(content=result.csv_text, media_type="text/csv; charset=utf-8", headers=headers)
