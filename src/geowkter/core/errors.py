"""
Custom exception hierarchy for GeoWKTer.

This module defines the exceptions raised by the WKT parser, the geometry
model and the API layer so that every failure reaches the caller as a typed
error with a stable error code.
"""

from typing import Any, Dict, List, Optional


class GeoWKTerException(Exception):
    """
    Base exception for all GeoWKTer-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        status_code: HTTP status code for API responses
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeoWKTerException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            status_code: HTTP status code (default: 500)
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}', "
            f"status_code={self.status_code})"
        )


class ValidationError(GeoWKTerException):
    """
    Raised when request validation fails.

    Maps to HTTP 400 Bad Request.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ValidationError.

        Args:
            message: User-friendly error message
            field: Name of the field that failed validation
            details: Technical details about the validation failure
            suggestions: List of suggestions for fixing the validation error
        """
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            details=error_details,
            suggestions=suggestions or ["Check the input format and try again"],
        )


class GeometryError(GeoWKTerException):
    """
    Raised when a geometry node is built with a payload that does not
    match its kind.

    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        geometry_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeometryError.

        Args:
            message: User-friendly error message
            geometry_type: Type of geometry that caused the error
            details: Technical details about the geometry error
            suggestions: List of suggestions for fixing the geometry
        """
        error_details = details or {}
        if geometry_type:
            error_details["geometry_type"] = geometry_type

        super().__init__(
            message=message,
            error_code="GEOMETRY_ERROR",
            status_code=422,
            details=error_details,
            suggestions=suggestions or ["Verify the coordinate nesting matches the geometry type"],
        )


class ParseError(GeoWKTerException):
    """
    Raised when WKT text cannot be parsed.

    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "PARSE_ERROR",
        fragment: Optional[str] = None,
        line_number: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ParseError.

        Args:
            message: User-friendly error message
            error_code: Specific parse error code
            fragment: The piece of WKT text that failed to parse
            line_number: Line number where parsing failed (if applicable)
            details: Technical details about the parsing failure
            suggestions: List of suggestions for fixing the input
        """
        error_details = details or {}
        if fragment is not None:
            error_details["fragment"] = fragment
        if line_number:
            error_details["line_number"] = line_number

        default_suggestions = [
            "Verify the input is a valid WKT geometry literal",
            "Check that every opening parenthesis has a matching close",
        ]

        super().__init__(
            message=message,
            error_code=error_code,
            status_code=422,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )

    @property
    def line_number(self) -> Optional[int]:
        """Line number of the failing literal, if known."""
        return self.details.get("line_number")

    def with_line(self, line_number: int) -> "ParseError":
        """
        Attach the source line number of the failing literal.

        Args:
            line_number: 1-based line number in the input text

        Returns:
            The same exception, for chaining in ``raise``
        """
        self.details["line_number"] = line_number
        return self


class WKTParseError(ParseError):
    """Base class for errors raised by the WKT grammar parser."""


class InvalidWKTError(WKTParseError):
    """Input does not have the ``TYPE(...)`` shape at all."""

    def __init__(self, message: str, fragment: Optional[str] = None) -> None:
        super().__init__(
            message,
            error_code="INVALID_WKT",
            fragment=fragment,
            suggestions=[
                "Use the form TYPE (body), for example POINT (30 10)",
                "EMPTY geometries are not supported",
            ],
        )


class UnsupportedGeometryTypeError(WKTParseError):
    """The geometry keyword is not one of the supported kinds."""

    def __init__(self, keyword: str, fragment: Optional[str] = None) -> None:
        self.keyword = keyword
        super().__init__(
            f"Unsupported WKT type: {keyword}",
            error_code="UNSUPPORTED_GEOMETRY_TYPE",
            fragment=fragment,
            details={"keyword": keyword},
            suggestions=[
                "Supported types: POINT, LINESTRING, POLYGON, MULTIPOINT, "
                "MULTILINESTRING, MULTIPOLYGON, GEOMETRYCOLLECTION",
            ],
        )


class MalformedStructureError(WKTParseError):
    """Parenthesis or comma structure cannot be decomposed."""

    def __init__(self, message: str, fragment: Optional[str] = None) -> None:
        super().__init__(
            message,
            error_code="MALFORMED_STRUCTURE",
            fragment=fragment,
            suggestions=[
                "Check that parentheses are balanced",
                "Separate parts with a single comma, e.g. (0 0, 1 1), (2 2, 3 3)",
            ],
        )


class MalformedCoordinateError(WKTParseError):
    """A coordinate pair fails numeric parsing."""

    def __init__(self, message: str, fragment: Optional[str] = None) -> None:
        super().__init__(
            message,
            error_code="MALFORMED_COORDINATE",
            fragment=fragment,
            suggestions=[
                "Write each coordinate as two numbers separated by a space",
                "Z and M dimensions are not supported",
            ],
        )
