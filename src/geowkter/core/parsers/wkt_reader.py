"""
WKT reading module.

Reads multi-line WKT text (one geometry literal per line), labels each
parsed geometry and assembles a GeoJSON FeatureCollection.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from geowkter.core.config import settings
from geowkter.core.errors import WKTParseError
from .geometry import GeometryKind, GeometryNode, to_geojson_geometry
from .wkt_parser import parse_geometry

logger = logging.getLogger(__name__)


@dataclass
class ParsedFeature:
    """
    A parsed geometry with its label.

    Attributes:
        geometry: Parsed geometry tree
        label: Name property for the resulting Feature
        line_number: 1-based line of the source literal
    """

    geometry: GeometryNode
    label: str
    line_number: Optional[int] = None

    @property
    def geometry_type(self) -> GeometryKind:
        """Kind of the wrapped geometry."""
        return self.geometry.kind

    def to_geojson(self) -> Dict[str, Any]:
        """Convert to a GeoJSON Feature."""
        return {
            "type": "Feature",
            "geometry": to_geojson_geometry(self.geometry),
            "properties": {"Name": self.label},
        }


@dataclass
class ParsedWKT:
    """
    Result of reading WKT text.

    Attributes:
        features: Successfully parsed features, in input order
        errors: Parse errors for lines that were skipped, each carrying its line number
        line_count: Number of non-blank lines read
    """

    features: List[ParsedFeature] = field(default_factory=list)
    errors: List[WKTParseError] = field(default_factory=list)
    line_count: int = 0

    @property
    def feature_count(self) -> int:
        """Get total number of features."""
        return len(self.features)

    @property
    def error_count(self) -> int:
        """Get number of lines that failed to parse."""
        return len(self.errors)

    def get_features_by_type(self, geometry_type: GeometryKind) -> List[ParsedFeature]:
        """Get features filtered by geometry kind."""
        return [f for f in self.features if f.geometry_type == geometry_type]

    def to_geojson(self) -> Dict[str, Any]:
        """Convert to a GeoJSON FeatureCollection."""
        return {
            "type": "FeatureCollection",
            "features": [feature.to_geojson() for feature in self.features],
        }


class WKTReader:
    """
    Read WKT text into labelled features.

    Handles:
    - One geometry literal per line; blank lines are ignored
    - Per-line failure isolation (or fail-fast with ``strict``)
    - Optional flattening of GeometryCollections into sibling features
    """

    def __init__(
        self,
        default_label: Optional[str] = None,
        flatten_collections: Optional[bool] = None,
        strict: bool = False,
    ) -> None:
        """
        Initialize WKT reader.

        Args:
            default_label: Name used when ``read`` gets no label (default from settings)
            flatten_collections: Emit collection members as separate features
                (default from settings)
            strict: Raise on the first malformed line instead of skipping it
        """
        self.default_label = (
            default_label if default_label is not None else settings.default_label
        )
        self.flatten_collections = (
            flatten_collections
            if flatten_collections is not None
            else settings.flatten_collections
        )
        self.strict = strict

    def read(self, wkt_text: str, label: Optional[str] = None) -> ParsedWKT:
        """
        Read WKT text.

        Args:
            wkt_text: One or more WKT literals separated by newlines
            label: Name property given to every feature

        Returns:
            ParsedWKT with features and per-line errors

        Raises:
            WKTParseError: On the first malformed line when ``strict`` is set
        """
        result = ParsedWKT()
        name = label or self.default_label

        for line_number, raw_line in enumerate(wkt_text.split("\n"), start=1):
            line = raw_line.strip()
            if not line:
                continue
            result.line_count += 1

            try:
                geometry = parse_geometry(line)
            except WKTParseError as e:
                e.with_line(line_number)
                if self.strict:
                    logger.error(f"Failed to parse WKT on line {line_number}: {e}")
                    raise
                logger.warning(
                    f"Skipping WKT on line {line_number}: {e}",
                    extra={"line_number": line_number, "error_code": e.error_code},
                )
                result.errors.append(e)
                continue

            result.features.extend(self._to_features(geometry, name, line_number))

        logger.info(
            f"Read {result.feature_count} feature(s) from {result.line_count} line(s), "
            f"{result.error_count} skipped"
        )
        return result

    def _to_features(
        self, geometry: GeometryNode, label: str, line_number: int
    ) -> List[ParsedFeature]:
        if self.flatten_collections and geometry.is_collection:
            return [
                ParsedFeature(geometry=child, label=label, line_number=line_number)
                for child in geometry.geometries
            ]
        return [ParsedFeature(geometry=geometry, label=label, line_number=line_number)]


def parse_wkt_string(
    wkt_text: str,
    label: Optional[str] = None,
    flatten_collections: Optional[bool] = None,
    strict: bool = False,
) -> ParsedWKT:
    """
    Convenience function to read WKT text.

    Args:
        wkt_text: One or more WKT literals separated by newlines
        label: Name property given to every feature
        flatten_collections: Emit collection members as separate features
        strict: Raise on the first malformed line

    Returns:
        ParsedWKT
    """
    reader = WKTReader(flatten_collections=flatten_collections, strict=strict)
    return reader.read(wkt_text, label=label)


def wkt_to_geojson(
    wkt_text: str,
    label: Optional[str] = None,
    flatten_collections: Optional[bool] = None,
    strict: bool = False,
) -> Dict[str, Any]:
    """
    Convert WKT text straight to a GeoJSON FeatureCollection.

    Malformed lines are skipped unless ``strict`` is set.

    Example:
        >>> wkt_to_geojson("POINT (30 10)", label="Well")["features"][0]["properties"]
        {'Name': 'Well'}
    """
    return parse_wkt_string(
        wkt_text, label=label, flatten_collections=flatten_collections, strict=strict
    ).to_geojson()
