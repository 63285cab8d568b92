"""Load the raw source tables from CSV files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pandas as pd

from butterfly_checklist.datasources.checklist.client import SOURCE_FILES
from butterfly_checklist.errors import SourceNotFoundError
from butterfly_checklist.schemas import SORT_KEYS, SourceTable, require_columns

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, eq=False)
class SourceTables:
    """The four raw tables of one data refresh."""

    distribution: pd.DataFrame
    taxa: pd.DataFrame
    regions: pd.DataFrame
    references: pd.DataFrame


def read_table(path: Path, table: SourceTable) -> pd.DataFrame:
    """Read one source CSV, check its columns and sort it by its key.

    Every value is read as a string (region codes like "NA" or "NO" must not
    become NaN or booleans); only empty cells are missing.

    Raises:
        SourceNotFoundError: ``path`` does not exist.
        MissingColumnsError: The file lacks a required column.
    """
    if not path.exists():
        msg = f"Source table {table.value!r} not found: {path}"
        raise SourceNotFoundError(msg)

    frame = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""], encoding="utf-8")
    frame = frame.rename(columns=str.strip)
    require_columns(frame, table)
    return frame.sort_values(SORT_KEYS[table], kind="stable", ignore_index=True)


def load_tables(source_dir: Path) -> SourceTables:
    """Read all four source tables from ``source_dir``."""
    frames = {table: read_table(source_dir / name, table) for table, name in SOURCE_FILES.items()}
    return SourceTables(
        distribution=frames[SourceTable.DISTRIBUTION],
        taxa=frames[SourceTable.TAXA],
        regions=frames[SourceTable.REGIONS],
        references=frames[SourceTable.REFERENCES],
    )
