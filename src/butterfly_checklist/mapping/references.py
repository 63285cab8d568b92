"""Collapse the reference table into one citation string per region."""

from __future__ import annotations

import pandas as pd

REFERENCE_SEPARATOR = " | "


def aggregate_references(references: pd.DataFrame) -> pd.DataFrame:
    """Build one ``reference`` string per region code.

    Citations are ordered by (citation_type, citation) and deduplicated on the
    citation text alone, so a source listed both as species list and as red
    list appears once, at its first position. Regions without references get
    no row.

    Args:
        references: Raw reference table with ``region_code``, ``citation`` and
            ``citation_type`` columns.

    Returns:
        Frame with ``region_code`` and ``reference`` columns, sorted by region.
    """
    usable = references.dropna(subset=["region_code", "citation"])
    usable = usable[usable["citation"].str.strip() != ""]
    if usable.empty:
        return pd.DataFrame(
            {"region_code": pd.Series(dtype=object), "reference": pd.Series(dtype=object)}
        )

    ordered = usable.sort_values(["region_code", "citation_type", "citation"], kind="stable")
    distinct = ordered.drop_duplicates(subset=["region_code", "citation"], keep="first")
    joined = distinct.groupby("region_code", sort=True)["citation"].agg(REFERENCE_SEPARATOR.join)
    return joined.reset_index(name="reference")
