"""Tests for loading the source tables from CSV."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd
import pytest

from butterfly_checklist.datasources.checklist import (
    SOURCE_FILES,
    load_tables,
    read_table,
    table_url,
)
from butterfly_checklist.errors import MissingColumnsError, SourceNotFoundError
from butterfly_checklist.schemas import SourceTable

if TYPE_CHECKING:
    from pathlib import Path


class TestTableUrl:
    def test_joins_base_and_file(self) -> None:
        url = table_url("https://example.org/data/", SourceTable.TAXA)
        assert url == "https://example.org/data/taxa.csv"

    def test_every_table_has_a_file(self) -> None:
        assert set(SOURCE_FILES) == set(SourceTable)


class TestReadTable:
    """Test reading a single CSV."""

    def test_sorted_by_key(self, source_dir: Path) -> None:
        frame = read_table(source_dir / "distribution.csv", SourceTable.DISTRIBUTION)
        keys = list(zip(frame["scientific_name"], frame["region_code"], strict=True))
        assert keys == sorted(keys)

    def test_empty_cells_are_missing(self, source_dir: Path) -> None:
        frame = read_table(source_dir / "regions.csv", SourceTable.REGIONS)
        belgium = frame[frame["region_code"] == "BE"].iloc[0]
        assert pd.isna(belgium["region_name"])
        assert belgium["country_name"] == "Belgium"

    def test_na_code_stays_text(self, tmp_path: Path) -> None:
        """Codes like NA (Namibia, or 'not applicable') must not become NaN."""
        path = tmp_path / "regions.csv"
        path.write_text(
            "region_code,region_name,country_code,country_name\nNA,,NA,Namibia\nNO,,NO,Norway\n"
        )
        frame = read_table(path, SourceTable.REGIONS)
        assert list(frame["region_code"]) == ["NA", "NO"]
        assert list(frame["country_code"]) == ["NA", "NO"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceNotFoundError, match="taxa"):
            read_table(tmp_path / "taxa.csv", SourceTable.TAXA)

    def test_missing_columns(self, tmp_path: Path) -> None:
        path = tmp_path / "references.csv"
        path.write_text("region_code,citation\nBE,Smith 2010\n")
        with pytest.raises(MissingColumnsError) as excinfo:
            read_table(path, SourceTable.REFERENCES)
        assert excinfo.value.missing == ["citation_type"]

    def test_header_whitespace_stripped(self, tmp_path: Path) -> None:
        path = tmp_path / "references.csv"
        path.write_text("region_code, citation ,citation_type\nBE,Smith 2010,species\n")
        frame = read_table(path, SourceTable.REFERENCES)
        assert "citation" in frame.columns


class TestLoadTables:
    def test_loads_all_four(self, source_dir: Path) -> None:
        tables = load_tables(source_dir)
        assert len(tables.distribution) == 6
        assert len(tables.taxa) == 2
        assert len(tables.regions) == 4
        assert len(tables.references) == 4
        assert "subfamily" in tables.taxa.columns
