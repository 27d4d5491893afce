from .response_parser import (
    NOT_AVAILABLE,
    Marker,
    ImagePair,
    ImageShape,
    Outcome,
    Status,
    classify_images,
    parse_extract,
    parse_images,
    parse_search,
    single_page,
)

__all__ = [
    "NOT_AVAILABLE",
    "Marker",
    "ImagePair",
    "ImageShape",
    "Outcome",
    "Status",
    "classify_images",
    "parse_extract",
    "parse_images",
    "parse_search",
    "single_page",
]
