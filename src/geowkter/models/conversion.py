"""
Pydantic models for WKT conversion requests and responses.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorDetail


class GeometryRequest(BaseModel):
    """Request body carrying a single WKT geometry literal."""

    wkt: str = Field(..., min_length=1, description="WKT geometry literal")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"wkt": "GEOMETRYCOLLECTION (POINT (4 6), LINESTRING (4 6, 7 10))"}
        }
    )


class ConvertRequest(BaseModel):
    """
    Request body for converting WKT text to a FeatureCollection.

    Attributes:
        wkt: One or more WKT literals separated by newlines
        label: Name property for every resulting feature
        flatten_collections: Emit GeometryCollection members as separate features
        strict: Fail the whole request on the first malformed line
    """

    wkt: str = Field(..., min_length=1, description="WKT literals, one per line")
    label: Optional[str] = Field(None, description="Name property for every feature")
    flatten_collections: Optional[bool] = Field(
        None, description="Emit GeometryCollection members as separate features"
    )
    strict: bool = Field(False, description="Fail on the first malformed line")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "wkt": "POINT (30 10)\nMULTIPOLYGON (((30 20, 45 40, 10 40, 30 20)))",
                "label": "Parcels",
                "flatten_collections": False,
                "strict": False,
            }
        }
    )


class ConvertResponse(BaseModel):
    """
    GeoJSON FeatureCollection plus the lines that were skipped.

    ``errors`` is a foreign member; GeoJSON readers ignore it.
    """

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[Dict[str, Any]] = Field(default_factory=list)
    errors: List[ErrorDetail] = Field(default_factory=list)
