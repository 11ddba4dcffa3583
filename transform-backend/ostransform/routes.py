from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Type

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from gridref.types import Invalid
from ostransform import transform
from ostransform.schemas import (
    EastingNorthingResponse,
    GeographicRequest,
    GridRefRequest,
    GridRefResponse,
    LatLngResponse,
    ProjectedRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

METHODS = ["GET", "POST"]

MISSING_PROJECTED = "Missing required parameters: ea (easting) and no (northing)"
MISSING_GEOGRAPHIC = "Missing required parameters: lat (latitude) and lng (longitude)"
MISSING_GRIDREF = "Missing required parameter: gridref (grid reference)"

INVALID_COORDINATES = "Invalid coordinates or out of bounds"
INVALID_GRIDREF = "Invalid grid reference"
INVALID_GRIDREF_OR_BOUNDS = "Invalid grid reference or out of bounds"

# Descriptions served by /health
ENDPOINTS = {
    "POST/GET /api/to-latlng": "Convert easting + northing to lat/lng (params: ea, no, decimals?)",
    "POST/GET /api/from-latlng": "Convert lat/lng to easting + northing (params: lat, lng, decimals?)",
    "POST/GET /api/to-gridref": "Convert easting + northing to grid reference (params: ea, no)",
    "POST/GET /api/from-gridref": "Convert grid reference to easting + northing (params: gridref)",
    "POST/GET /api/gridref-to-latlng": "Convert grid reference directly to lat/lng (params: gridref, decimals?)",
}


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


async def _request_data(request: Request) -> Dict[str, Any]:
    """Query parameters if any were given, otherwise the JSON body of a POST."""
    if request.query_params:
        return dict(request.query_params)
    if request.method == "POST":
        try:
            payload = await request.json()
        except Exception:
            return {}
        if isinstance(payload, dict):
            return payload
    return {}


def _missing(data: Dict[str, Any], *keys: str) -> bool:
    return any(data.get(k) is None or data.get(k) == "" for k in keys)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


async def _handle(
    request: Request,
    required: tuple,
    missing_message: str,
    model: Type[BaseModel],
    convert: Callable[[Any], Any],
    invalid_message: str,
):
    try:
        data = await _request_data(request)
        if _missing(data, *required):
            return _error(400, missing_message)
        try:
            params = model.model_validate(data)
        except ValidationError as ve:
            return _error(400, f"Invalid parameters: {_describe(ve)}")
        res = convert(params)
        if isinstance(res, Invalid):
            return _error(400, invalid_message)
        return res
    except Exception as e:
        logger.exception("%s failed", request.url.path)
        return _error(500, str(e))


@router.api_route("/to-latlng", methods=METHODS, response_model=LatLngResponse)
async def to_latlng(request: Request):
    def convert(p: ProjectedRequest):
        res = transform.to_latlng(p.ea, p.no, p.decimals)
        return res if isinstance(res, Invalid) else LatLngResponse.from_coordinate(res.value)

    return await _handle(request, ("ea", "no"), MISSING_PROJECTED, ProjectedRequest, convert, INVALID_COORDINATES)


@router.api_route("/from-latlng", methods=METHODS, response_model=EastingNorthingResponse)
async def from_latlng(request: Request):
    def convert(p: GeographicRequest):
        res = transform.from_latlng(p.lat, p.lng, p.decimals)
        return res if isinstance(res, Invalid) else EastingNorthingResponse.from_coordinate(res.value)

    return await _handle(request, ("lat", "lng"), MISSING_GEOGRAPHIC, GeographicRequest, convert, INVALID_COORDINATES)


@router.api_route("/to-gridref", methods=METHODS, response_model=GridRefResponse)
async def to_gridref(request: Request):
    def convert(p: ProjectedRequest):
        res = transform.to_gridref(p.ea, p.no)
        return res if isinstance(res, Invalid) else GridRefResponse.from_gridref(res.value)

    return await _handle(request, ("ea", "no"), MISSING_PROJECTED, ProjectedRequest, convert, INVALID_COORDINATES)


@router.api_route("/from-gridref", methods=METHODS, response_model=EastingNorthingResponse)
async def from_gridref(request: Request):
    def convert(p: GridRefRequest):
        res = transform.from_gridref(p.gridref)
        return res if isinstance(res, Invalid) else EastingNorthingResponse.from_coordinate(res.value)

    return await _handle(request, ("gridref",), MISSING_GRIDREF, GridRefRequest, convert, INVALID_GRIDREF)


@router.api_route("/gridref-to-latlng", methods=METHODS, response_model=LatLngResponse)
async def gridref_to_latlng(request: Request):
    def convert(p: GridRefRequest):
        res = transform.gridref_to_latlng(p.gridref, p.decimals)
        return res if isinstance(res, Invalid) else LatLngResponse.from_coordinate(res.value)

    return await _handle(request, ("gridref",), MISSING_GRIDREF, GridRefRequest, convert, INVALID_GRIDREF_OR_BOUNDS)


__all__ = ["router", "ENDPOINTS"]
