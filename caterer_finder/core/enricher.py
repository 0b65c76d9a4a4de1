"""Place Details enrichment for caterer candidates."""

import logging
import time
from typing import Any, Dict, List, Optional, Sequence

import requests

from caterer_finder.core.config import DEFAULT_PACING, Pacing
from caterer_finder.etl.reviews import MAX_REVIEWS, merge_reviews
from caterer_finder.etl.transform import to_enriched
from caterer_finder.models import Candidate, EnrichedCaterer
from caterer_finder.vendors import google_places

logger = logging.getLogger(__name__)


def fetch_place_details(place_id: str, api_key: str, pacing: Pacing = DEFAULT_PACING) -> Optional[Dict[str, Any]]:
    """Collect details plus up to ``MAX_REVIEWS`` distinct reviews for ``place_id``.

    The details endpoint returns at most five reviews per call, so one request is
    issued per review sort order and the review sets are merged. Returns ``None``
    when every request fails.
    """
    details: Optional[Dict[str, Any]] = None
    reviews: List[Dict[str, Any]] = []

    for sort_order in google_places.REVIEW_SORT_ORDERS:
        try:
            result = google_places.place_details(place_id=place_id, api_key=api_key, reviews_sort=sort_order)
        except (google_places.GooglePlacesError, requests.RequestException) as exc:
            logger.warning("Could not get details for place %s with sort %s: %s", place_id, sort_order, exc)
            time.sleep(pacing.sort_order_delay)
            continue

        if details is None:
            details = dict(result)
        reviews = merge_reviews(reviews, result.get("reviews") or [], limit=MAX_REVIEWS)
        if len(reviews) >= MAX_REVIEWS:
            break
        time.sleep(pacing.sort_order_delay)

    if details is not None:
        details["reviews"] = reviews
    return details


def enrich_candidate(candidate: Candidate, api_key: str, pacing: Pacing = DEFAULT_PACING) -> EnrichedCaterer:
    try:
        details = fetch_place_details(candidate.place_id, api_key, pacing)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Failed to fetch details for %s (%s): %s", candidate.name, candidate.place_id, exc)
        details = None
    if details is None:
        logger.warning("No details available for %s (%s); using placeholders", candidate.name, candidate.place_id)
    return to_enriched(candidate, details)


def enrich_candidates(
    candidates: Sequence[Candidate],
    api_key: str,
    pacing: Pacing = DEFAULT_PACING,
) -> List[EnrichedCaterer]:
    logger.info("Enriching caterer data with additional details...")
    enriched: List[EnrichedCaterer] = []
    total = len(candidates)
    for index, candidate in enumerate(candidates, start=1):
        logger.info("Processing caterer %d of %d: %s", index, total, candidate.name)
        enriched.append(enrich_candidate(candidate, api_key, pacing))
        time.sleep(pacing.candidate_delay)
    return enriched
