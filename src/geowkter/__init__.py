"""
GeoWKTer - Well-Known Text to GeoJSON conversion.

This package parses WKT geometry literals, including nested
GEOMETRYCOLLECTIONs, into geometry trees and GeoJSON objects.
"""

__version__ = "0.1.0"
