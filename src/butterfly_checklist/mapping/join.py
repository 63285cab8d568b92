"""Left-join distribution records with taxon, region and reference data."""

from __future__ import annotations

import logging

import pandas as pd

from butterfly_checklist.errors import JoinCardinalityError
from butterfly_checklist.schemas import SORT_KEYS, SourceTable

logger = logging.getLogger(__name__)

# Added by join_records: True when the record's region_code found a region row
REGION_MATCHED = "region_matched"


def _duplicated_keys(table: pd.DataFrame, key: str) -> list[str]:
    dupes = table.loc[table[key].duplicated(keep=False), key]
    return [str(k) for k in dupes.dropna().unique()]


def _left_join(
    left: pd.DataFrame,
    right: pd.DataFrame,
    key: str,
    table: str,
) -> pd.DataFrame:
    """Left join that refuses to add or drop rows.

    Lookup rows with a missing key never match.
    """
    keyed = right.dropna(subset=[key])
    joined = left.merge(keyed, how="left", on=key, suffixes=("", f"_{table}"))
    if len(joined) != len(left):
        raise JoinCardinalityError(
            table=table,
            key=key,
            duplicates=_duplicated_keys(keyed, key),
            expected=len(left),
            actual=len(joined),
        )
    return joined


def join_records(
    distribution: pd.DataFrame,
    taxa: pd.DataFrame,
    regions: pd.DataFrame,
    references: pd.DataFrame,
) -> pd.DataFrame:
    """Enrich each distribution record with its taxon, region and references.

    Unmatched taxa, regions or references leave missing values; no row is
    dropped. The result has exactly one row per distribution record, ordered
    by (scientific_name, region_code), with a boolean ``region_matched``
    column telling whether the region lookup found a row.

    Args:
        distribution: Raw distribution records.
        taxa: Raw taxon records, unique on ``scientific_name``.
        regions: Raw region records, unique on ``region_code``.
        references: Aggregated references (see ``aggregate_references``).

    Raises:
        JoinCardinalityError: A lookup table has duplicate keys.
    """
    ordered = distribution.sort_values(
        SORT_KEYS[SourceTable.DISTRIBUTION], kind="stable", ignore_index=True
    )
    enriched = _left_join(ordered, taxa, "scientific_name", "taxa")
    located = regions.assign(**{REGION_MATCHED: True})
    enriched = _left_join(enriched, located, "region_code", "regions")
    enriched = enriched.assign(**{REGION_MATCHED: enriched[REGION_MATCHED].eq(True)})
    enriched = _left_join(enriched, references, "region_code", "references")

    logger.info("Joined %d distribution records", len(enriched))
    return enriched
