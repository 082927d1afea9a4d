"""modules/geo — coordinate sources for extracted place names."""

from modules.geo.gazetteer import FALLBACK_COORDINATES, lookup, normalize_key
from modules.geo.geocoding_client import OpenCageGeocoder

__all__ = [
    "FALLBACK_COORDINATES",
    "lookup",
    "normalize_key",
    "OpenCageGeocoder",
]
