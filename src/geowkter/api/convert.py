"""
WKT conversion API endpoints.
"""

import logging
from typing import Any, Dict, Union

from fastapi import APIRouter, status

from geowkter.core.config import settings
from geowkter.core.errors import ValidationError
from geowkter.core.parsers import WKTReader, parse_geometry, to_geojson_geometry
from geowkter.models.conversion import ConvertRequest, ConvertResponse, GeometryRequest
from geowkter.models.errors import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/convert", tags=["convert"])

_ERROR_RESPONSES: Dict[Union[int, str], Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Input too large"},
    422: {"model": ErrorResponse, "description": "Malformed WKT or invalid request"},
}


def _check_length(wkt: str) -> None:
    if len(wkt) > settings.max_wkt_length:
        raise ValidationError(
            f"WKT input is {len(wkt)} characters; maximum is {settings.max_wkt_length}",
            field="wkt",
            suggestions=["Split the input into smaller requests"],
        )


@router.post(
    "",
    response_model=ConvertResponse,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
    summary="Convert WKT text to a GeoJSON FeatureCollection",
    description=(
        "Each non-blank line is parsed as one WKT geometry literal. Lines that "
        "fail to parse are reported in `errors` unless `strict` is set, in which "
        "case the first failure rejects the request."
    ),
)
async def convert_wkt(request: ConvertRequest) -> ConvertResponse:
    """
    Convert WKT text to a FeatureCollection.

    Args:
        request: WKT text and conversion options

    Returns:
        ConvertResponse with features and per-line errors

    Raises:
        ValidationError: If the input exceeds the configured maximum length
        WKTParseError: On the first malformed line when ``strict`` is set
    """
    _check_length(request.wkt)

    reader = WKTReader(
        flatten_collections=request.flatten_collections,
        strict=request.strict,
    )
    result = reader.read(request.wkt, label=request.label)

    return ConvertResponse(
        features=result.to_geojson()["features"],
        errors=[
            ErrorDetail(field=f"line {e.line_number}", message=e.message, code=e.error_code)
            for e in result.errors
        ],
    )


@router.post(
    "/geometry",
    responses=_ERROR_RESPONSES,
    summary="Convert one WKT literal to a GeoJSON geometry",
)
async def convert_geometry(request: GeometryRequest) -> Dict[str, Any]:
    """
    Convert a single WKT geometry literal to a GeoJSON geometry object.

    Raises:
        ValidationError: If the input exceeds the configured maximum length
        WKTParseError: If the literal is malformed
    """
    _check_length(request.wkt)

    geometry = parse_geometry(request.wkt)
    logger.info(f"Converted {geometry.kind.value} geometry")
    return to_geojson_geometry(geometry)
