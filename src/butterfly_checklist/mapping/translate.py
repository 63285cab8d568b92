"""Translate raw categorical codes into Darwin Core vocabulary terms.

Lookups go through the tables in ``reference/``. A code missing from a table
translates to ``UNMAPPED`` (empty string); ``find_unmapped_codes`` surfaces
those codes so the tables can be extended before the output is trusted.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Any, Literal

import pandas as pd

from butterfly_checklist.errors import UnmappedCodeError
from butterfly_checklist.mapping.join import REGION_MATCHED
from butterfly_checklist.reference.regions import (
    ISO_3166_PREFIX,
    MARINE_REGION_URIS,
    PSEUDO_REGIONS,
    archipelago_of,
)
from butterfly_checklist.reference.vocabularies import OCCURRENCE_STATUS, THREAT_STATUS, UNMAPPED

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def as_text(value: Any) -> str:
    """Missing values (None, NaN) become ``""``; everything else ``str``."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value)


# =============================================================================
# Code lookups
# =============================================================================


def occurrence_status(status: str | None) -> str:
    """Checklist status code -> occurrenceStatus term."""
    return OCCURRENCE_STATUS.get(as_text(status), UNMAPPED)


def threat_status(rlc: str | None) -> str:
    """Red-list code -> threatStatus term."""
    return THREAT_STATUS.get(as_text(rlc), UNMAPPED)


def location_id(
    region_code: str, region_name: str | None = None, region_matched: bool = True
) -> str:
    """Region code -> locationID.

    Pseudo-regions get no identifier, Macaronesian islands a Marine Regions
    URI, and country-level regions (a region row without ``region_name``) an
    ISO 3166 code. Named regions outside the marine table and codes with no
    region row are unmapped.
    """
    code = as_text(region_code)
    if code in PSEUDO_REGIONS:
        return ""
    if code in MARINE_REGION_URIS:
        return MARINE_REGION_URIS[code]
    if code and region_matched and not as_text(region_name):
        return ISO_3166_PREFIX + code
    return UNMAPPED


def locality(
    region_code: str, region_name: str | None = None, country_name: str | None = None
) -> str:
    """Region code -> human readable locality.

    Country-level regions use the country name, islands are prefixed with
    their archipelago (``"Azores, Corvo"``), other regions use their name.
    """
    name = as_text(region_name)
    if not name:
        return as_text(country_name) or PSEUDO_REGIONS.get(as_text(region_code), "")
    archipelago = archipelago_of(as_text(region_code))
    if archipelago:
        return f"{archipelago}, {name}"
    return name


# =============================================================================
# Unmapped-code audit
# =============================================================================


def _location_is_mapped(region_code: str, region_name: str, region_matched: bool) -> bool:
    return (
        region_code in PSEUDO_REGIONS
        or region_code in MARINE_REGION_URIS
        or (region_matched and not region_name)
    )


def _count(codes: Iterable[str]) -> dict[str, int]:
    return dict(sorted(Counter(codes).items()))


def find_unmapped_codes(records: pd.DataFrame) -> dict[str, dict[str, int]]:
    """Count codes no vocabulary table covers, per source column.

    Missing codes (empty status, red-list or region code) are not unmapped;
    only non-empty codes absent from a table are reported. A region code
    with no row in the regions table is unmapped.

    Returns:
        ``{column: {code: occurrences}}`` for columns with unmapped codes.
    """
    statuses = [as_text(v) for v in records["status"]]
    rlcs = [as_text(v) for v in records["rlc"]]
    regions = zip(
        (as_text(v) for v in records["region_code"]),
        (as_text(v) for v in records["region_name"]),
        records[REGION_MATCHED].astype(bool),
        strict=True,
    )

    found = {
        "status": _count(s for s in statuses if s and s not in OCCURRENCE_STATUS),
        "rlc": _count(r for r in rlcs if r and r not in THREAT_STATUS),
        "region_code": _count(
            code for code, name, matched in regions
            if code and not _location_is_mapped(code, name, matched)
        ),
    }
    return {column: codes for column, codes in found.items() if codes}


def check_unmapped_codes(
    records: pd.DataFrame,
    policy: Literal["warn", "fail"] = "warn",
) -> dict[str, dict[str, int]]:
    """Log every unmapped code; raise under the ``fail`` policy.

    Raises:
        UnmappedCodeError: ``policy`` is ``"fail"`` and unmapped codes exist.
    """
    unmapped = find_unmapped_codes(records)
    for column, codes in unmapped.items():
        for code, occurrences in codes.items():
            logger.warning("Unmapped %s code %r (%d records)", column, code, occurrences)

    if unmapped and policy == "fail":
        raise UnmappedCodeError(unmapped)
    return unmapped
