"""Regional butterfly checklist source feed.

Public API:
  - client: SOURCE_FILES, table_url
  - download: download_table (raw bytes over HTTP)
  - tables: SourceTables, read_table, load_tables
"""

from butterfly_checklist.datasources.checklist.client import SOURCE_FILES, table_url
from butterfly_checklist.datasources.checklist.download import download_table
from butterfly_checklist.datasources.checklist.tables import SourceTables, load_tables, read_table

__all__ = [
    "SOURCE_FILES",
    "SourceTables",
    "download_table",
    "load_tables",
    "read_table",
    "table_url",
]
