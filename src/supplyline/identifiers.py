"""
Spreadsheet identifier extraction.

Accepts either a bare spreadsheet ID or a full Google Sheets URL such as
``https://docs.google.com/spreadsheets/d/<ID>/edit#gid=0`` and returns the ID.
"""

import re

from supplyline.errors import InvalidIdentifierFormatError, MissingInputError

_PATH_OR_QUERY = re.compile(r"[/?]")
_SHEET_URL_ID = re.compile(r"/spreadsheets/d/([A-Za-z0-9_-]+)")


def extract_sheet_id(url_or_id: str | None) -> str:
    """
    Extract a spreadsheet ID from a URL, or return a bare ID unchanged.

    Args:
        url_or_id: Google Sheets URL or spreadsheet ID.

    Returns:
        The spreadsheet ID.

    Raises:
        MissingInputError: If the input is empty or None.
        InvalidIdentifierFormatError: If the input contains path or query
            characters but no ``/spreadsheets/d/<ID>`` segment.
    """
    if not url_or_id:
        msg = "Sheet URL or ID is required"
        raise MissingInputError(msg)

    if not _PATH_OR_QUERY.search(url_or_id):
        return url_or_id

    match = _SHEET_URL_ID.search(url_or_id)
    if match:
        return match.group(1)

    raise InvalidIdentifierFormatError(url_or_id)
