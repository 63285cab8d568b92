"""Download source tables over HTTP."""

from __future__ import annotations

from butterfly_checklist.datasources.checklist.client import table_url
from butterfly_checklist.schemas import SourceTable
from butterfly_checklist.services.http import session


def download_table(base_url: str, table: SourceTable) -> bytes:
    """
    Fetch the raw CSV bytes of one source table.

    Args:
        base_url: URL of the directory holding the four CSV files.
        table: Which table to fetch.

    Returns:
        Response body, unparsed.
    """
    resp = session.get(table_url(base_url, table))
    resp.raise_for_status()
    return resp.content
