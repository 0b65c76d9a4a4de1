"""Utilities for transforming Google Places responses into caterer records and sheet rows."""

import logging
from typing import Any, Dict, List, Optional

from caterer_finder.etl.address import parse_address
from caterer_finder.etl.reviews import classify_reviews
from caterer_finder.models import (
    NO_PHONE,
    NO_RATING,
    NO_WEBSITE,
    UNKNOWN_PRICE,
    Candidate,
    EnrichedCaterer,
)

logger = logging.getLogger(__name__)

MAPS_URL_TEMPLATE = "https://www.google.com/maps/place/?q=place_id:{place_id}"

SHEET_HEADERS = [
    "Name",
    "Street Address",
    "City",
    "State",
    "Zip",
    "Phone",
    "Website",
    "Maps URL",
    "Rating",
    "Reviews",
    "Price Level",
    "Wedding Reviews",
    "Wedding Caterer",
]


def _safe_float(value: Any) -> Optional[float]:
    try:
        if value is None:
            return None
        return float(value)
    except (TypeError, ValueError):
        return None


def to_candidate(result: Dict[str, Any]) -> Candidate:
    address = result.get("formatted_address") or ""
    parts = parse_address(address)
    location = (result.get("geometry") or {}).get("location") or {}
    rating = _safe_float(result.get("rating"))

    return Candidate(
        name=result.get("name") or "",
        place_id=result.get("place_id") or "",
        address=address,
        street=parts.street,
        city=parts.city,
        state=parts.state,
        zip_code=parts.zip_code,
        rating=rating if rating else NO_RATING,
        total_ratings=int(result.get("user_ratings_total") or 0),
        latitude=_safe_float(location.get("lat")),
        longitude=_safe_float(location.get("lng")),
    )


def maps_url(place_id: str) -> str:
    return MAPS_URL_TEMPLATE.format(place_id=place_id)


def render_price_level(level: Any) -> str:
    """Render the 0-4 ``price_level`` ordinal as repeated dollar signs."""
    if isinstance(level, bool) or not isinstance(level, int):
        return UNKNOWN_PRICE
    if not 0 <= level <= 4:
        logger.debug("Out of range price_level=%s", level)
        return UNKNOWN_PRICE
    return "$" * level


def to_enriched(candidate: Candidate, details: Optional[Dict[str, Any]]) -> EnrichedCaterer:
    """Merge Place Details into ``candidate``; ``details=None`` yields the degraded record."""
    url = maps_url(candidate.place_id)
    if details is None:
        return EnrichedCaterer(candidate=candidate, maps_url=url)

    reviews = details.get("reviews") or []
    return EnrichedCaterer(
        candidate=candidate,
        maps_url=url,
        phone=details.get("formatted_phone_number") or NO_PHONE,
        website=details.get("website") or NO_WEBSITE,
        price_level=render_price_level(details.get("price_level")),
        wedding=classify_reviews(reviews),
        review_count=len(reviews),
    )


def to_sheet_row(caterer: EnrichedCaterer) -> List[Any]:
    candidate = caterer.candidate
    return [
        candidate.name,
        candidate.street,
        candidate.city,
        candidate.state,
        candidate.zip_code,
        caterer.phone,
        caterer.website,
        caterer.maps_url,
        str(candidate.rating),
        candidate.total_ratings or 0,
        caterer.price_level,
        caterer.wedding.match_count,
        "Yes" if caterer.wedding.has_matches else "No",
    ]
