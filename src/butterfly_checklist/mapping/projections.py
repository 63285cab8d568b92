"""Project identified records into the three Darwin Core tables.

Each projection returns a string-valued frame with exactly the output
columns declared in ``schemas.py`` (missing values as ``""``), ordered by
scientific name and region code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from butterfly_checklist.mapping.translate import (
    locality,
    location_id,
    occurrence_status,
    threat_status,
)
from butterfly_checklist.schemas import (
    DISTRIBUTION_OUTPUT_COLUMNS,
    TAXON_OUTPUT_COLUMNS,
    VERNACULAR_NAME_OUTPUT_COLUMNS,
)

if TYPE_CHECKING:
    from butterfly_checklist.config import DatasetMetadata

# Fixed classification for every taxon in the checklist
KINGDOM = "Animalia"
PHYLUM = "Arthropoda"
CLASS = "Insecta"
ORDER = "Lepidoptera"
TAXON_RANK = "species"
NOMENCLATURAL_CODE = "ICZN"

VERNACULAR_LANGUAGE = "en"
# English names still under discussion carry this marker and are not published
SUGGESTION_MARKER = "suggestion"


def _as_text_frame(records: pd.DataFrame) -> pd.DataFrame:
    return records.astype(object).where(records.notna(), "")


def _first_per_taxon(identified: pd.DataFrame) -> pd.DataFrame:
    first = identified.drop_duplicates(subset="taxon_id", keep="first")
    return _as_text_frame(first.sort_values("scientific_name", kind="stable"))


def _in_source_as(regional: str, accepted: str) -> str:
    if regional and regional != accepted:
        return f"In source as '{regional}'"
    return ""


def project_taxon(identified: pd.DataFrame, metadata: DatasetMetadata) -> pd.DataFrame:
    """One Taxon row per distinct ``taxon_id``, dataset metadata first."""
    taxa = _first_per_taxon(identified)
    columns = {
        "language": metadata.language,
        "license": metadata.license,
        "rightsHolder": metadata.rights_holder,
        "accessRights": metadata.access_rights,
        "datasetID": metadata.dataset_id,
        "institutionCode": metadata.institution_code,
        "datasetName": metadata.dataset_name,
        "taxonID": taxa["taxon_id"],
        "scientificName": taxa["scientific_name"],
        "kingdom": KINGDOM,
        "phylum": PHYLUM,
        "class": CLASS,
        "order": ORDER,
        "family": taxa["family"],
        "genus": taxa["genus"],
        "specificEpithet": taxa["specific_epithet"],
        "taxonRank": TAXON_RANK,
        "scientificNameAuthorship": taxa["authorship"],
        "nomenclaturalCode": NOMENCLATURAL_CODE,
    }
    frame = pd.DataFrame(columns, index=taxa.index, columns=list(TAXON_OUTPUT_COLUMNS))
    return frame.reset_index(drop=True)


def project_distribution(identified: pd.DataFrame) -> pd.DataFrame:
    """One Distribution row per identified record, no deduplication."""
    records = _as_text_frame(
        identified.sort_values(["scientific_name", "region_code"], kind="stable")
    )
    rows = [
        {
            "taxonID": r.taxon_id,
            "locationID": location_id(r.region_code, r.region_name, r.region_matched),
            "locality": locality(r.region_code, r.region_name, r.country_name),
            "countryCode": r.country_code,
            "occurrenceStatus": occurrence_status(r.status),
            "threatStatus": threat_status(r.rlc),
            "source": r.reference,
            "occurrenceRemarks": _in_source_as(r.scientific_name_regional, r.scientific_name),
        }
        for r in records.itertuples(index=False)
    ]
    return pd.DataFrame(rows, columns=list(DISTRIBUTION_OUTPUT_COLUMNS))


def project_vernacular_names(identified: pd.DataFrame) -> pd.DataFrame:
    """One English name per distinct ``taxon_id``, skipping suggested names."""
    taxa = _first_per_taxon(identified)
    names = taxa["english_name"]
    published = taxa[(names != "") & ~names.str.contains(SUGGESTION_MARKER, regex=False)]
    frame = pd.DataFrame(
        {
            "taxonID": published["taxon_id"],
            "vernacularName": published["english_name"],
            "language": VERNACULAR_LANGUAGE,
        },
        index=published.index,
        columns=list(VERNACULAR_NAME_OUTPUT_COLUMNS),
    )
    return frame.reset_index(drop=True)
