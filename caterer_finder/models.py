"""Core data models shared by the caterer search pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

NO_RATING = "No rating"
NO_PHONE = "No phone number"
NO_WEBSITE = "No website"
UNKNOWN_PRICE = "Unknown"


@dataclass(frozen=True)
class AddressComponents:
    street: str
    city: str = ""
    state: str = ""
    zip_code: str = ""


@dataclass(frozen=True)
class ReviewClassification:
    """Outcome of scanning a review set for a keyword."""

    has_matches: bool = False
    match_count: int = 0


@dataclass(slots=True, frozen=True)
class Candidate:
    """Normalized snapshot of a business returned by the Places text search."""

    name: str
    place_id: str
    address: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    rating: Union[float, str] = NO_RATING
    total_ratings: int = 0
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass(frozen=True)
class EnrichedCaterer:
    """A candidate merged with Place Details data and its review classification."""

    candidate: Candidate
    maps_url: str
    phone: str = NO_PHONE
    website: str = NO_WEBSITE
    price_level: str = UNKNOWN_PRICE
    wedding: ReviewClassification = field(default_factory=ReviewClassification)
    review_count: int = 0

    @property
    def name(self) -> str:
        return self.candidate.name

    @property
    def place_id(self) -> str:
        return self.candidate.place_id
