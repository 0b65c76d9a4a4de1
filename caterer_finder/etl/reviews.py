"""Review helpers: keyword classification and cross-request de-duplication."""

from typing import Any, Dict, Iterable, List, Mapping

from caterer_finder.models import ReviewClassification

WEDDING_KEYWORD = "wedding"
WEDDING_REVIEW_THRESHOLD = 2
MAX_REVIEWS = 20


def classify_reviews(reviews: Any, keyword: str = WEDDING_KEYWORD) -> ReviewClassification:
    if not isinstance(reviews, list):
        return ReviewClassification()

    matches = 0
    for review in reviews:
        if not isinstance(review, Mapping):
            continue
        text = review.get("text")
        if text and keyword in str(text).lower():
            matches += 1

    return ReviewClassification(has_matches=matches >= WEDDING_REVIEW_THRESHOLD, match_count=matches)


def review_key(review: Mapping[str, Any]) -> str:
    # time + author_name concatenated; distinct reviews can collide on this key.
    return f"{review.get('time', '')}{review.get('author_name', '')}"


def merge_reviews(
    existing: List[Dict[str, Any]],
    incoming: Iterable[Dict[str, Any]],
    limit: int = MAX_REVIEWS,
) -> List[Dict[str, Any]]:
    """Return ``existing`` extended with unseen reviews from ``incoming``, capped at ``limit``."""
    merged = list(existing[:limit])
    seen = {review_key(review) for review in merged}
    for review in incoming or []:
        if len(merged) >= limit:
            break
        if not isinstance(review, Mapping):
            continue
        key = review_key(review)
        if key in seen:
            continue
        seen.add(key)
        merged.append(review)
    return merged
