#!/usr/bin/env python3
"""
Unit Test: Query Object Decoders

Validates search, extract and image decoding against recorded query shapes.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from transform.response_parser import (
    NOT_AVAILABLE,
    ImagePair,
    ImageShape,
    Status,
    classify_images,
    parse_extract,
    parse_images,
    parse_search,
    single_page,
)


def test_search_takes_first_hit():
    query = {"search": [{"title": "Robert Downey Jr."}, {"title": "Robert Downey Sr."}]}
    assert parse_search(query) == (Status.OK, "Robert Downey Jr.")


def test_search_empty_is_no_title():
    assert parse_search({"search": []}) == ("no_title_found", "no title found")
    assert parse_search({}) == (Status.NO_TITLE_FOUND, "no title found")


def test_extract_single_page():
    query = {"pages": {"123": {"extract": "Some text."}}}
    outcome = parse_extract(query)

    assert outcome == (Status.OK, "Some text.")
    assert outcome.ok


def test_extract_without_pages():
    query = {"normalized": [{"from": "a", "to": "A"}]}
    assert parse_extract(query) == (Status.NO_EXTRACT_FOUND, "title and extract not found")


def test_extract_missing_page():
    query = {"pages": {"-1": {"ns": 0, "title": "Nope", "missing": ""}}}
    assert parse_extract(query).status is Status.NO_EXTRACT_FOUND


def test_single_page_requires_exactly_one():
    assert single_page({"pages": {}}) is None
    assert single_page({"pages": {"1": {"title": "A"}, "2": {"title": "B"}}}) is None
    assert single_page({"pages": ["not", "a", "mapping"]}) is None
    assert single_page({"pages": {"7": {"title": "A"}}}) == {"title": "A"}


def test_extract_with_two_pages_is_not_found():
    query = {"pages": {"1": {"extract": "one"}, "2": {"extract": "two"}}}
    assert parse_extract(query).status is Status.NO_EXTRACT_FOUND


def test_image_shape_priority():
    assert classify_images({"thumbnail": {"source": "A", "original": "B"}}) is ImageShape.SOURCE_AND_ORIGINAL
    assert classify_images({"thumbnail": {"source": "A"}}) is ImageShape.SOURCE_ONLY
    assert classify_images({"thumbnail": {"original": "B"}}) is ImageShape.ORIGINAL_ONLY
    assert classify_images({"thumbnail": {}}) is ImageShape.MISSING
    assert classify_images({"pageimage": "x.jpg"}) is ImageShape.MISSING
    assert classify_images(None) is ImageShape.MISSING


def test_images_both_present():
    query = {"pages": {"5": {"thumbnail": {"source": "A", "original": "B", "width": 50}}}}
    assert parse_images(query) == (Status.OK, ("A", "B"))


def test_images_source_only():
    query = {"pages": {"5": {"thumbnail": {"source": "A"}}}}
    assert parse_images(query) == (Status.OK, ImagePair("A", NOT_AVAILABLE))


def test_images_original_only():
    query = {"pages": {"5": {"thumbnail": {"original": "B"}}}}
    assert parse_images(query) == (Status.OK, ImagePair(NOT_AVAILABLE, "B"))


def test_images_missing():
    query = {"pages": {"5": {"title": "Plain page"}}}
    outcome = parse_images(query)

    assert outcome == (Status.NO_IMAGES, (NOT_AVAILABLE, NOT_AVAILABLE))
    assert not outcome.ok


def test_images_without_pages():
    assert parse_images({}).status is Status.NO_IMAGES


def test_marker_exported_with_not_available():
    import transform

    assert transform.NOT_AVAILABLE is transform.Marker.NOT_AVAILABLE
    assert "Marker" in transform.__all__
