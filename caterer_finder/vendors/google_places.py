"""Client utilities for the Google Places API."""

import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://maps.googleapis.com/maps/api/place"

DETAIL_FIELDS = "formatted_phone_number,website,price_level,reviews"
REVIEW_SORT_ORDERS = ("most_relevant", "newest", "highest", "lowest")


class GooglePlacesError(RuntimeError):
    """Raised when the Places API returns a non-successful response."""


def text_search(
    query: str,
    api_key: str,
    pagetoken: Optional[str] = None,
    place_type: Optional[str] = None,
) -> Dict[str, Any]:
    params = {"query": query, "key": api_key}
    if place_type:
        params["type"] = place_type
    if pagetoken:
        params["pagetoken"] = pagetoken
    response = _SESSION.get(f"{_BASE_URL}/textsearch/json", params=params, timeout=10)
    response.raise_for_status()
    payload = response.json()
    status = payload.get("status")
    if status not in {"OK", "ZERO_RESULTS"}:
        logger.error("text_search failed: status=%s, error_message=%s", status, payload.get("error_message"))
        raise GooglePlacesError(f"{status} - {payload.get('error_message') or 'Unknown error'}")
    return payload


def place_details(place_id: str, api_key: str, reviews_sort: Optional[str] = None) -> Dict[str, Any]:
    params = {"place_id": place_id, "key": api_key, "fields": DETAIL_FIELDS}
    if reviews_sort:
        params["reviews_sort"] = reviews_sort
    response = _SESSION.get(f"{_BASE_URL}/details/json", params=params, timeout=10)
    response.raise_for_status()
    payload = response.json()
    status = payload.get("status")
    if status != "OK":
        logger.warning("place_details failed: place_id=%s status=%s", place_id, status)
        raise GooglePlacesError(payload.get("error_message") or status)
    return payload.get("result") or {}
