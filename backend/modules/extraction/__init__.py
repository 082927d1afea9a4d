"""modules/extraction — recommendation text → geocoded places."""

from modules.extraction.parser import (
    DestinationHeader,
    PlaceCandidate,
    is_destination_header,
    iter_candidates,
    normalize_name,
    split_header,
    split_place_names,
)
from modules.extraction.place_extractor import (
    DEFAULT_PLACES,
    ExtractionFailure,
    ExtractionResult,
    PlaceExtractor,
    extract_places,
)

__all__ = [
    "DestinationHeader",
    "PlaceCandidate",
    "is_destination_header",
    "iter_candidates",
    "normalize_name",
    "split_header",
    "split_place_names",
    "DEFAULT_PLACES",
    "ExtractionFailure",
    "ExtractionResult",
    "PlaceExtractor",
    "extract_places",
]
