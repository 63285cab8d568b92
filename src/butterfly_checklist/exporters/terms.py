"""Darwin Core / GBIF term URIs for every output column."""

from butterfly_checklist.schemas import OutputTable

DC = "http://purl.org/dc/terms/"
DWC = "http://rs.tdwg.org/dwc/terms/"
IUCN = "http://iucn.org/terms/"

TERM_URIS: dict[str, str] = {
    "language": DC + "language",
    "license": DC + "license",
    "rightsHolder": DC + "rightsHolder",
    "accessRights": DC + "accessRights",
    "source": DC + "source",
    "threatStatus": IUCN + "threatStatus",
}

ROW_TYPES: dict[OutputTable, str] = {
    OutputTable.TAXON: DWC + "Taxon",
    OutputTable.DISTRIBUTION: "http://rs.gbif.org/terms/1.0/Distribution",
    OutputTable.VERNACULAR_NAME: "http://rs.gbif.org/terms/1.0/VernacularName",
}


def term_uri(column: str) -> str:
    """Full term URI of an output column; Darwin Core unless listed above."""
    return TERM_URIS.get(column, DWC + column)
