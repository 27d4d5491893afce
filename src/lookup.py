#!/usr/bin/env python3
"""
Wikipedia Lookup

Resolves a free-text term to an article title, then fetches its extract
and representative images in one pass.
"""

import logging
import sys
from typing import Optional

from config import ConfigManager
from extract.api_client import MediawikiClient
from transform.response_parser import ImagePair

logger = logging.getLogger(__name__)


class WikiLookup:
    """
    Wires configuration into a MediawikiClient and summarizes one term.

    Each dependent call re-runs the search, so a summary costs up to
    five requests.
    """

    def __init__(self, config_path: str = "settings.yaml", client: Optional[MediawikiClient] = None):
        self.config = ConfigManager(config_path)
        self.client = client or MediawikiClient(
            base_url=self.config.wikipedia_base_url,
            timeout=self.config.timeout,
            user_agent=self.config.user_agent
        )

    def run(self, term: str) -> dict:
        logger.info(f"Looking up: {term!r}")

        found = self.client.search(term)
        summary = {"term": term, "status": found.status.value, "title": None,
                   "extract": None, "images": None}

        if not found.ok:
            logger.info(f"Lookup stopped: {found.payload}")
            return summary

        summary["title"] = found.payload
        logger.info(f"Normalized title: {found.payload}")

        extract = self.client.extract(term)
        if extract.ok:
            summary["extract"] = extract.payload
        else:
            logger.info(f"Extract: {extract.payload}")

        images = self.client.images(term)
        if isinstance(images.payload, ImagePair):
            summary["images"] = images.payload
            logger.info(f"Images ({images.status.value}): "
                        f"thumbnail={images.payload.thumbnail}, original={images.payload.original}")
        else:
            logger.info(f"Images: {images.payload}")

        return summary

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def main(argv: Optional[list] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("usage: lookup.py <search term> [settings.yaml]", file=sys.stderr)
        return 2

    term = argv[0]
    config_path = argv[1] if len(argv) > 1 else "settings.yaml"

    with WikiLookup(config_path) as lookup:
        logging.basicConfig(
            level=lookup.config.log_level,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[logging.StreamHandler(sys.stdout)]
        )
        summary = lookup.run(term)

    if summary["extract"]:
        print(summary["extract"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
