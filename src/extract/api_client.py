"""MediaWiki API client: search a term, then fetch article data for the best match."""

import logging
from typing import Optional

import requests

from transform.response_parser import (
    NO_TITLE,
    Outcome,
    Status,
    parse_extract,
    parse_images,
    parse_search,
)


class MediawikiClient:
    """Client for the search, revisions, extracts and pageimages queries of the MediaWiki API."""

    BASE_URL = "https://en.wikipedia.org/w/api.php"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 30,
        user_agent: str = "wiki-lookup/0.1.0 (Python)",
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url
        self.timeout = timeout

        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"User-Agent": user_agent})
        self.logger = logging.getLogger(__name__)

    def search(self, term: str) -> Outcome:
        # The API rejects an empty srsearch with a missingparam error
        if not term.strip():
            self.logger.info(f"No title found for blank term {term!r}")
            return NO_TITLE

        self.logger.info(f"Searching for title: {term!r}")
        query = self._query(self._build_params(
            list="search",
            srprop="",
            srinfo="",
            srsearch=term
        ))
        outcome = parse_search(query)

        if not outcome.ok:
            self.logger.info(f"No title found for {term!r}")
        return outcome

    def article(self, term: str) -> Outcome:
        """Raw revision content for the best match, as the undecoded query object."""
        found = self.search(term)
        if not found.ok:
            return found

        query = self._query(self._build_params(
            prop="revisions",
            rvprop="content",
            titles=found.payload
        ))
        return Outcome(Status.OK, query)

    def extract(self, term: str) -> Outcome:
        """Plain-text intro (at most four sentences) for the best match."""
        found = self.search(term)
        if not found.ok:
            return found

        query = self._query(self._build_params(
            prop="extracts",
            exsectionformat="plain",
            exsentences=4,
            exintro="",
            explaintext="",
            titles=found.payload
        ))
        return parse_extract(query)

    def images(self, term: str) -> Outcome:
        """
        Thumbnail and original image URLs for the best match.

        Either URL is replaced by NOT_AVAILABLE when the API omits it;
        if both are missing the status is no_images.
        """
        found = self.search(term)
        if not found.ok:
            return found

        query = self._query(self._build_params(
            prop="pageimages",
            piprop="name|original|thumbnail",
            titles=found.payload
        ))
        return parse_images(query)

    def _build_params(self, **kwargs) -> dict:
        return {"format": "json", "action": "query", **kwargs}

    def _query(self, params: dict) -> dict:
        """GET base_url with params and return the top-level 'query' object. Faults propagate."""
        self.logger.debug(f"GET {self.base_url} {params}")

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Request failed for {self.base_url} {params}: {e}")
            raise

        query = data.get("query") if isinstance(data, dict) else None
        if not isinstance(query, dict):
            self.logger.error(f"Response without query object for {params}")
            raise ValueError(f"Malformed MediaWiki response: {data}")

        return query

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"MediawikiClient(base_url={self.base_url}, timeout={self.timeout}s)"
