"""
Version utility functions.
"""

from geowkter import __version__


def get_version() -> str:
    """
    Get the current version of GeoWKTer.

    Returns:
        str: The version string.
    """
    return __version__


def format_version_info() -> dict[str, str]:
    """
    Get formatted version information.

    Returns:
        dict[str, str]: Dictionary containing version information.
    """
    return {
        "name": "GeoWKTer API",
        "version": get_version(),
        "description": "Well-Known Text to GeoJSON conversion",
    }
