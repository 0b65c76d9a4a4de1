"""CLI job to find caterers via Google Places and publish them to Google Sheets."""

import argparse
import dataclasses
import logging
from typing import List, Optional

from caterer_finder.core.auth import CodeExchanger, TokenStore, authorize
from caterer_finder.core.config import DEFAULT_PACING, Pacing, Settings, get_settings
from caterer_finder.core.enricher import enrich_candidates
from caterer_finder.core.search import search_candidates
from caterer_finder.core.sheets import build_sheets_service, create_caterer_sheet, spreadsheet_url

logger = logging.getLogger(__name__)


def run_caterer_job(
    settings: Settings,
    pacing: Pacing = DEFAULT_PACING,
    store: Optional[TokenStore] = None,
    exchanger: Optional[CodeExchanger] = None,
) -> Optional[str]:
    if not settings.google_api_key:
        raise RuntimeError("GOOGLE_API_KEY is required")

    logger.info("Searching for caterers...")
    candidates = search_candidates(settings, pacing)
    logger.info("Found %d caterers.", len(candidates))
    if not candidates:
        logger.info("No caterers found. Exiting.")
        return None

    enriched = enrich_candidates(candidates, settings.google_api_key, pacing)

    logger.info("Authorizing with Google...")
    credentials = authorize(settings, store=store, exchanger=exchanger)

    logger.info("Creating Google Sheet...")
    service = build_sheets_service(credentials)
    spreadsheet_id = create_caterer_sheet(service, enriched, settings.title)

    logger.info("Process completed successfully! View your spreadsheet at: %s", spreadsheet_url(spreadsheet_id))
    return spreadsheet_id


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find caterers with Google Places and export them to Google Sheets")
    parser.add_argument("--city", dest="city", help="Target city (overrides CATERER_CITY)")
    parser.add_argument("--state", dest="state", help="Target state code (overrides CATERER_STATE)")
    parser.add_argument(
        "--max-results",
        dest="max_results",
        type=int,
        help="Maximum number of search results to fetch (overrides CATERER_MAX_RESULTS)",
    )
    parser.add_argument("--title", dest="sheet_title", help="Spreadsheet title (overrides SHEET_TITLE)")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {
        name: value
        for name, value in vars(args).items()
        if value is not None and name in {"city", "state", "max_results", "sheet_title"}
    }
    if "max_results" in overrides and overrides["max_results"] <= 0:
        raise ValueError("--max-results must be positive")
    return dataclasses.replace(settings, **overrides)


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    args = build_parser().parse_args(argv)

    try:
        settings = apply_overrides(get_settings(), args)
        run_caterer_job(settings)
    except Exception as exc:  # noqa: BLE001
        logger.error("Caterer job failed: %s", exc, exc_info=True)


if __name__ == "__main__":
    main()
