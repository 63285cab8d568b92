"""Source table locations.

The four tables are published as UTF-8 CSV files side by side, either in a
local directory or under one base URL.
"""

from __future__ import annotations

from butterfly_checklist.schemas import SourceTable

SOURCE_FILES: dict[SourceTable, str] = {
    SourceTable.DISTRIBUTION: "distribution.csv",
    SourceTable.TAXA: "taxa.csv",
    SourceTable.REGIONS: "regions.csv",
    SourceTable.REFERENCES: "references.csv",
}


def table_url(base_url: str, table: SourceTable) -> str:
    """Return the download URL of ``table`` under ``base_url``."""
    return f"{base_url.rstrip('/')}/{SOURCE_FILES[table]}"
