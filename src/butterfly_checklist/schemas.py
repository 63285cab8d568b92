"""
Table schemas for the checklist pipeline.

Raw tables arrive from the source feed with the column names declared here;
output tables follow the Darwin Core column order expected by the archive.
These are the canonical column sets - loaders and projections check against them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from butterfly_checklist.errors import MissingColumnsError

if TYPE_CHECKING:
    import pandas as pd

# =============================================================================
# Source tables
# =============================================================================


class SourceTable(StrEnum):
    """The four raw tables supplied by the source feed."""

    DISTRIBUTION = "distribution"
    TAXA = "taxa"
    REGIONS = "regions"
    REFERENCES = "references"


DISTRIBUTION_COLUMNS = (
    "scientific_name_regional",
    "scientific_name",
    "region_code",
    "status",
    "rlc",
    "comments",
)
TAXON_COLUMNS = (
    "scientific_name",
    "family",
    "genus",
    "specific_epithet",
    "authorship",
    "english_name",
)
REGION_COLUMNS = ("region_code", "region_name", "country_code", "country_name")
REFERENCE_COLUMNS = ("region_code", "citation", "citation_type")

REQUIRED_COLUMNS: dict[SourceTable, tuple[str, ...]] = {
    SourceTable.DISTRIBUTION: DISTRIBUTION_COLUMNS,
    SourceTable.TAXA: TAXON_COLUMNS,
    SourceTable.REGIONS: REGION_COLUMNS,
    SourceTable.REFERENCES: REFERENCE_COLUMNS,
}

# Sort keys used for reproducible diffs between runs
SORT_KEYS: dict[SourceTable, list[str]] = {
    SourceTable.DISTRIBUTION: ["scientific_name", "region_code"],
    SourceTable.TAXA: ["scientific_name"],
    SourceTable.REGIONS: ["region_code"],
    SourceTable.REFERENCES: ["region_code", "citation"],
}


def require_columns(df: pd.DataFrame, table: SourceTable) -> None:
    """Raise ``MissingColumnsError`` if ``df`` lacks any required column."""
    missing = set(REQUIRED_COLUMNS[table]) - set(df.columns)
    if missing:
        raise MissingColumnsError(table.value, missing)


# =============================================================================
# Output tables (Darwin Core)
# =============================================================================


class OutputTable(StrEnum):
    """The three Darwin Core tables written to the archive."""

    TAXON = "taxon"
    DISTRIBUTION = "distribution"
    VERNACULAR_NAME = "vernacularname"


TAXON_OUTPUT_COLUMNS = (
    "language",
    "license",
    "rightsHolder",
    "accessRights",
    "datasetID",
    "institutionCode",
    "datasetName",
    "taxonID",
    "scientificName",
    "kingdom",
    "phylum",
    "class",
    "order",
    "family",
    "genus",
    "specificEpithet",
    "taxonRank",
    "scientificNameAuthorship",
    "nomenclaturalCode",
)
DISTRIBUTION_OUTPUT_COLUMNS = (
    "taxonID",
    "locationID",
    "locality",
    "countryCode",
    "occurrenceStatus",
    "threatStatus",
    "source",
    "occurrenceRemarks",
)
VERNACULAR_NAME_OUTPUT_COLUMNS = ("taxonID", "vernacularName", "language")

OUTPUT_COLUMNS: dict[OutputTable, tuple[str, ...]] = {
    OutputTable.TAXON: TAXON_OUTPUT_COLUMNS,
    OutputTable.DISTRIBUTION: DISTRIBUTION_OUTPUT_COLUMNS,
    OutputTable.VERNACULAR_NAME: VERNACULAR_NAME_OUTPUT_COLUMNS,
}


# =============================================================================
# Run summary
# =============================================================================


class RunSummary(BaseModel):
    """Row counts and audit findings for one pipeline run."""

    distribution_records: int
    excluded_records: int
    taxa: int
    distributions: int
    vernacular_names: int
    unmapped_codes: dict[str, dict[str, int]] = Field(default_factory=dict)
