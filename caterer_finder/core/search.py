"""Paginated Places text search producing caterer candidates."""

import logging
import time
from typing import Any, Dict, List

from caterer_finder.core.config import DEFAULT_PACING, Pacing, Settings
from caterer_finder.etl.transform import to_candidate
from caterer_finder.models import Candidate
from caterer_finder.vendors import google_places

logger = logging.getLogger(__name__)


def build_query(settings: Settings) -> str:
    return f"{settings.search_term} in {settings.city}, {settings.state}"


def search_candidates(settings: Settings, pacing: Pacing = DEFAULT_PACING) -> List[Candidate]:
    """Follow ``next_page_token`` until exhausted or ``settings.max_results`` is reached.

    A failed page aborts the whole search with ``GooglePlacesError``.
    """
    query = build_query(settings)
    logger.info("Running Places text search for query=%s type=%s", query, settings.place_type)

    results: List[Dict[str, Any]] = []
    page_token = None
    page = 0

    while True:
        if page_token:
            time.sleep(pacing.page_token_delay)
        response = google_places.text_search(
            query=query,
            api_key=settings.google_api_key,
            pagetoken=page_token,
            place_type=settings.place_type,
        )
        page_results = response.get("results", [])
        results.extend(page_results)
        page += 1
        logger.info("Fetched %d results on page %d. Total: %d", len(page_results), page, len(results))

        page_token = response.get("next_page_token")
        if not page_token or len(results) >= settings.max_results:
            break

    return [to_candidate(result) for result in results[: settings.max_results]]
