"""Google Sheets output for enriched caterers."""

import logging
from typing import Any, Dict, List, Sequence

from googleapiclient.discovery import build

from caterer_finder.etl.transform import SHEET_HEADERS, to_sheet_row
from caterer_finder.models import EnrichedCaterer

logger = logging.getLogger(__name__)

WORKSHEET_TITLE = "Caterers"
SPREADSHEET_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{spreadsheet_id}/edit"
_LAST_COLUMN = chr(ord("A") + len(SHEET_HEADERS) - 1)


def build_sheets_service(credentials: Any) -> Any:
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


def spreadsheet_url(spreadsheet_id: str) -> str:
    return SPREADSHEET_URL_TEMPLATE.format(spreadsheet_id=spreadsheet_id)


def _format_requests(sheet_id: int) -> List[Dict[str, Any]]:
    return [
        {
            "repeatCell": {
                "range": {"sheetId": sheet_id, "startRowIndex": 0, "endRowIndex": 1},
                "cell": {
                    "userEnteredFormat": {
                        "backgroundColor": {"red": 0.8, "green": 0.8, "blue": 0.8},
                        "horizontalAlignment": "CENTER",
                        "textFormat": {"bold": True},
                    }
                },
                "fields": "userEnteredFormat(backgroundColor,textFormat,horizontalAlignment)",
            }
        },
        {
            "autoResizeDimensions": {
                "dimensions": {
                    "sheetId": sheet_id,
                    "dimension": "COLUMNS",
                    "startIndex": 0,
                    "endIndex": len(SHEET_HEADERS),
                }
            }
        },
    ]


def create_caterer_sheet(service: Any, caterers: Sequence[EnrichedCaterer], title: str) -> str:
    """Create a spreadsheet titled ``title`` holding one row per caterer and return its id.

    Any API error propagates; a spreadsheet created before the failure is left in place.
    """
    spreadsheets = service.spreadsheets()

    created = spreadsheets.create(
        body={
            "properties": {"title": title},
            "sheets": [{"properties": {"title": WORKSHEET_TITLE}}],
        }
    ).execute()
    spreadsheet_id = created["spreadsheetId"]
    logger.info("Created spreadsheet with ID: %s", spreadsheet_id)

    metadata = spreadsheets.get(spreadsheetId=spreadsheet_id).execute()
    sheet_id = metadata["sheets"][0]["properties"]["sheetId"]

    rows = [to_sheet_row(caterer) for caterer in caterers]
    spreadsheets.values().update(
        spreadsheetId=spreadsheet_id,
        range=f"{WORKSHEET_TITLE}!A1:{_LAST_COLUMN}1",
        valueInputOption="RAW",
        body={"values": [SHEET_HEADERS]},
    ).execute()
    spreadsheets.values().update(
        spreadsheetId=spreadsheet_id,
        range=f"{WORKSHEET_TITLE}!A2:{_LAST_COLUMN}{len(rows) + 1}",
        valueInputOption="RAW",
        body={"values": rows},
    ).execute()

    spreadsheets.batchUpdate(
        spreadsheetId=spreadsheet_id,
        body={"requests": _format_requests(sheet_id)},
    ).execute()

    logger.info("Spreadsheet successfully updated: %s", spreadsheet_url(spreadsheet_id))
    return spreadsheet_id
