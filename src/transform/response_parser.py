"""MediaWiki query-object decoders using pure functions (functional programming approach)."""

import logging
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Union

logger = logging.getLogger(__name__)


class Status(str, Enum):
    OK = "ok"
    NO_TITLE_FOUND = "no_title_found"
    NO_EXTRACT_FOUND = "no_extract_found"
    NO_IMAGES = "no_images"


class Marker(Enum):
    NOT_AVAILABLE = "not_available"


NOT_AVAILABLE = Marker.NOT_AVAILABLE


class ImagePair(NamedTuple):
    thumbnail: Union[str, Marker]
    original: Union[str, Marker]


class Outcome(NamedTuple):
    """Tagged result of a lookup: a Status plus its payload (data or explanation)."""

    status: Status
    payload: Any

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


class ImageShape(Enum):
    """Which image sub-fields a page carries, in match priority order."""

    SOURCE_AND_ORIGINAL = 1
    SOURCE_ONLY = 2
    ORIGINAL_ONLY = 3
    MISSING = 4


NO_TITLE = Outcome(Status.NO_TITLE_FOUND, "no title found")
NO_EXTRACT = Outcome(Status.NO_EXTRACT_FOUND, "title and extract not found")
NO_IMAGES = Outcome(Status.NO_IMAGES, ImagePair(NOT_AVAILABLE, NOT_AVAILABLE))


def parse_search(query: Dict) -> Outcome:
    """
    Pick the normalized title out of a list=search query object.

    The first hit wins; the service's ranking is kept as-is.
    """
    hits = query.get("search") or []
    if not hits:
        return NO_TITLE

    title = hits[0]["title"]
    logger.debug(f"Search returned {len(hits)} hits, using '{title}'")
    return Outcome(Status.OK, title)


def single_page(query: Dict) -> Optional[Dict]:
    """
    Return the only entry of query['pages'].

    A single-title lookup yields exactly one page; anything else returns None.
    """
    pages = query.get("pages")
    if not isinstance(pages, dict):
        return None

    if len(pages) != 1:
        logger.warning(f"Expected exactly one page, got {len(pages)}: {list(pages)}")
        return None

    page = next(iter(pages.values()))
    return page if isinstance(page, dict) else None


def parse_extract(query: Dict) -> Outcome:
    page = single_page(query)
    if page is None:
        return NO_EXTRACT

    extract = page.get("extract")
    if not isinstance(extract, str):
        # Missing pages come back as {"ns": 0, "title": ..., "missing": ""}
        return NO_EXTRACT

    return Outcome(Status.OK, extract)


def classify_images(page: Optional[Dict]) -> ImageShape:
    """
    Classify a pageimages page by the thumbnail fields it carries.

    SOURCE_AND_ORIGINAL is tested first since it is a superset of the
    other two shapes.
    """
    thumbnail = (page or {}).get("thumbnail")
    if not isinstance(thumbnail, dict):
        return ImageShape.MISSING

    has_source = "source" in thumbnail
    has_original = "original" in thumbnail

    if has_source and has_original:
        return ImageShape.SOURCE_AND_ORIGINAL
    elif has_source:
        return ImageShape.SOURCE_ONLY
    elif has_original:
        return ImageShape.ORIGINAL_ONLY
    else:
        return ImageShape.MISSING


def parse_images(query: Dict) -> Outcome:
    page = single_page(query)
    shape = classify_images(page)

    if shape is ImageShape.MISSING:
        return NO_IMAGES

    thumbnail = page["thumbnail"]
    if shape is ImageShape.SOURCE_AND_ORIGINAL:
        pair = ImagePair(thumbnail["source"], thumbnail["original"])
    elif shape is ImageShape.SOURCE_ONLY:
        pair = ImagePair(thumbnail["source"], NOT_AVAILABLE)
    else:
        pair = ImagePair(NOT_AVAILABLE, thumbnail["original"])

    return Outcome(Status.OK, pair)
