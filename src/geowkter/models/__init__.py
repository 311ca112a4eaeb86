"""
Data models and schemas.
"""

from .conversion import ConvertRequest, ConvertResponse, GeometryRequest
from .errors import ErrorDetail, ErrorResponse

__all__ = [
    "ConvertRequest",
    "ConvertResponse",
    "GeometryRequest",
    "ErrorDetail",
    "ErrorResponse",
]
