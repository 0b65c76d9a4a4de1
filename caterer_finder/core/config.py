"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CITY = "Portland"
DEFAULT_STATE = "ME"


@dataclass(frozen=True)
class Settings:
    google_api_key: str
    city: str = DEFAULT_CITY
    state: str = DEFAULT_STATE
    max_results: int = 100
    search_term: str = "caterers"
    place_type: str = "food"
    credentials_path: str = "./credentials.json"
    token_path: str = "./token.json"
    sheet_title: str = ""

    @property
    def title(self) -> str:
        return self.sheet_title or f"Caterers in {self.city}, {self.state}"


@dataclass(frozen=True)
class Pacing:
    """Fixed delays (seconds) used to stay under Places API rate limits.

    A next_page_token is rejected with INVALID_REQUEST until it has been live for
    a couple of seconds, so ``page_token_delay`` must not be dropped in production.
    """

    page_token_delay: float = 2.0
    sort_order_delay: float = 0.3
    candidate_delay: float = 0.2

    @classmethod
    def immediate(cls) -> "Pacing":
        return cls(page_token_delay=0.0, sort_order_delay=0.0, candidate_delay=0.0)


DEFAULT_PACING = Pacing()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    google_api_key = os.getenv("GOOGLE_API_KEY", "")
    city = os.getenv("CATERER_CITY", DEFAULT_CITY).strip()
    state = os.getenv("CATERER_STATE", DEFAULT_STATE).strip()
    max_results = int(os.getenv("CATERER_MAX_RESULTS", "100"))
    search_term = os.getenv("CATERER_SEARCH_TERM", "caterers").strip()
    place_type = os.getenv("CATERER_PLACE_TYPE", "food").strip()
    credentials_path = os.getenv("GOOGLE_CREDENTIALS_PATH", "./credentials.json")
    token_path = os.getenv("GOOGLE_TOKEN_PATH", "./token.json")
    sheet_title = os.getenv("SHEET_TITLE", "")

    if max_results <= 0:
        raise ValueError("CATERER_MAX_RESULTS must be positive")
    if not google_api_key:
        logger.warning("GOOGLE_API_KEY is not configured; Google Places requests will fail.")
    if not os.path.exists(credentials_path):
        logger.warning("OAuth client file %s not found; Google Sheets authorization will fail.", credentials_path)

    return Settings(
        google_api_key=google_api_key,
        city=city,
        state=state,
        max_results=max_results,
        search_term=search_term,
        place_type=place_type,
        credentials_path=credentials_path,
        token_path=token_path,
        sheet_title=sheet_title,
    )
