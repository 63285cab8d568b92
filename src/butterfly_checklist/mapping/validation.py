"""Restrict enriched records to names accepted by the reference taxonomy.

The checklist only covers accepted taxa. A distribution record whose
scientific name found no taxon is out-of-scope data, not an error: it is
excluded from every output table and listed in the report for manual review.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pandas as pd

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["scientific_name_regional", "scientific_name", "region_code", "comments"]


@dataclass(frozen=True, eq=False)
class ValidationReport:
    """Distribution records excluded because their name matched no taxon."""

    excluded: pd.DataFrame

    @property
    def count(self) -> int:
        """Number of excluded distribution records."""
        return len(self.excluded)

    @property
    def names(self) -> list[str]:
        """Distinct excluded scientific names, sorted."""
        return sorted(self.excluded["scientific_name"].dropna().unique())


def validate_taxa(enriched: pd.DataFrame) -> tuple[pd.DataFrame, ValidationReport]:
    """Split enriched records into accepted ones and a report of the rest.

    A record is accepted when its taxon attributes were joined, i.e. its
    ``family`` is present.

    Returns:
        Tuple of (validated records, report of excluded records).
    """
    matched = enriched["family"].notna()
    validated = enriched[matched].reset_index(drop=True)
    excluded = enriched.loc[~matched, REPORT_COLUMNS].reset_index(drop=True)

    for row in excluded.itertuples(index=False):
        logger.warning(
            "Excluding %r in %s: no accepted taxon (comments: %s)",
            row.scientific_name_regional,
            row.region_code,
            row.comments if isinstance(row.comments, str) else "",
        )
    if len(excluded):
        logger.warning(
            "Excluded %d of %d distribution records (%d names)",
            len(excluded),
            len(enriched),
            excluded["scientific_name"].nunique(),
        )

    return validated, ValidationReport(excluded=excluded)
