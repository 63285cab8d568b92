"""
Prefect flow for downloading the checklist source tables.

Each table is cached under ``raw/`` with a sidecar freshness record; tables
that are still fresh are not downloaded again.

Run locally:
    CHECKLIST_SOURCE_BASE_URL=https://example.org/checklist python -m butterfly_checklist.flows.fetch
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NONE

from butterfly_checklist.config import get_settings
from butterfly_checklist.datasources.checklist import SOURCE_FILES, download_table, table_url
from butterfly_checklist.schemas import SourceTable
from butterfly_checklist.store import DataStore

# Data store rooted at the configured data directory
store = DataStore(get_settings().data_dir)


def raw_path(table: SourceTable) -> Path:
    """Relative store path of a source table."""
    return Path("raw") / SOURCE_FILES[table]


@task(name="download-table", retries=2, retry_delay_seconds=5)
def fetch_table(base_url: str, table: SourceTable) -> bytes:
    """Download one source table."""
    return download_table(base_url, table)


@task(name="save-table", cache_policy=NONE)
def save_table(table: SourceTable, content: bytes, base_url: str, ttl_days: int) -> Path:
    """Cache a downloaded table in the raw tier."""
    return store.write_bytes(
        raw_path(table),
        content,
        source=table_url(base_url, table),
        valid_until=datetime.now(UTC) + timedelta(days=ttl_days),
    )


@flow(name="fetch-sources", log_prints=True)
def fetch_all(base_url: str | None = None, ttl_days: int | None = None) -> dict[str, Any]:
    """
    Download all source tables that are missing or stale.

    Args:
        base_url: URL of the directory holding the CSV files
            (default: ``Settings.source_base_url``).
        ttl_days: How long a downloaded table stays fresh
            (default: ``Settings.source_ttl_days``).
    """
    settings = get_settings()
    base_url = base_url or settings.source_base_url
    ttl_days = ttl_days if ttl_days is not None else settings.source_ttl_days

    if not base_url:
        print("No source base URL configured, using local source tables.")
        return {"fetched": [], "fresh": [], "skipped": True}

    fetched: list[str] = []
    fresh: list[str] = []
    for table in SourceTable:
        if store.is_fresh(raw_path(table)):
            print(f"{table.value} table is fresh, skipping download.")
            fresh.append(table.value)
            continue

        print(f"Downloading {table.value} table from {table_url(base_url, table)}...")
        content = fetch_table(base_url, table)
        path = save_table(table, content, base_url, ttl_days)
        print(f"Saved {len(content)} bytes to {path}")
        fetched.append(table.value)

    return {"fetched": fetched, "fresh": fresh, "skipped": False}


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
