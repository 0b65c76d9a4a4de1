import dataclasses

import pytest

from caterer_finder.etl import transform
from caterer_finder.models import NO_PHONE, NO_RATING, NO_WEBSITE, UNKNOWN_PRICE, Candidate, EnrichedCaterer


def _raw_place(**overrides):
    raw = {
        "name": "Acme Catering",
        "place_id": "pid-1",
        "formatted_address": "123 Main St, Springfield, OR 97201, USA",
        "rating": 4.6,
        "user_ratings_total": 87,
        "geometry": {"location": {"lat": 45.5, "lng": -122.6}},
    }
    raw.update(overrides)
    return raw


def test_to_candidate_parses_address_and_location():
    candidate = transform.to_candidate(_raw_place())

    assert candidate.name == "Acme Catering"
    assert candidate.place_id == "pid-1"
    assert candidate.street == "123 Main St"
    assert candidate.city == "Springfield"
    assert candidate.state == "OR"
    assert candidate.zip_code == "97201"
    assert candidate.rating == 4.6
    assert candidate.total_ratings == 87
    assert (candidate.latitude, candidate.longitude) == (45.5, -122.6)


def test_to_candidate_uses_sentinels_for_missing_fields():
    candidate = transform.to_candidate({"name": "Bare", "place_id": "pid-2"})
    assert candidate.rating == NO_RATING
    assert candidate.total_ratings == 0
    assert candidate.latitude is None
    assert candidate.address == ""


def test_render_price_level():
    assert transform.render_price_level(3) == "$$$"
    assert transform.render_price_level(0) == ""
    assert transform.render_price_level(None) == UNKNOWN_PRICE
    assert transform.render_price_level(9) == UNKNOWN_PRICE


def test_maps_url_is_built_from_place_id():
    assert transform.maps_url("abc") == "https://www.google.com/maps/place/?q=place_id:abc"


def test_to_enriched_without_details_is_degraded():
    candidate = Candidate(name="Acme", place_id="pid")
    enriched = transform.to_enriched(candidate, None)

    assert enriched.phone == NO_PHONE
    assert enriched.website == NO_WEBSITE
    assert enriched.price_level == UNKNOWN_PRICE
    assert enriched.review_count == 0
    assert enriched.wedding.has_matches is False
    assert enriched.maps_url.endswith("place_id:pid")


def test_to_enriched_merges_details():
    candidate = Candidate(name="Acme", place_id="pid")
    details = {
        "formatted_phone_number": "(207) 555-0100",
        "website": "https://acme.test",
        "price_level": 2,
        "reviews": [
            {"time": 1, "author_name": "a", "text": "Wedding dinner"},
            {"time": 2, "author_name": "b", "text": "our wedding"},
            {"time": 3, "author_name": "c", "text": "lunch"},
        ],
    }

    enriched = transform.to_enriched(candidate, details)

    assert enriched.phone == "(207) 555-0100"
    assert enriched.website == "https://acme.test"
    assert enriched.price_level == "$$"
    assert enriched.review_count == 3
    assert enriched.wedding.match_count == 2
    assert enriched.wedding.has_matches is True


def test_to_sheet_row_matches_headers():
    candidate = transform.to_candidate(_raw_place())
    enriched = EnrichedCaterer(candidate=candidate, maps_url=transform.maps_url("pid-1"), price_level="$$")

    row = transform.to_sheet_row(enriched)

    assert len(row) == len(transform.SHEET_HEADERS) == 13
    assert row[:5] == ["Acme Catering", "123 Main St", "Springfield", "OR", "97201"]
    assert row[8] == "4.6"
    assert row[9] == 87
    assert row[11:] == [0, "No"]


def test_candidate_is_immutable_after_search():
    candidate = transform.to_candidate(_raw_place())
    with pytest.raises(dataclasses.FrozenInstanceError):
        candidate.city = "Elsewhere"
    assert not hasattr(candidate, "raw_snapshot")
