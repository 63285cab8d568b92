"""Occurrence-status and threat-status vocabularies.

Targets are the GBIF Species Distribution extension vocabularies:
  - occurrenceStatus: https://rs.gbif.org/vocabulary/gbif/occurrence_status.xml
  - threatStatus: IUCN Red List categories
"""

# Value for any code a table does not list
UNMAPPED = ""

# Checklist status code -> occurrenceStatus.
# "M" stays "migrant" rather than folding into "irregular": migrant status is
# too significant to conflate.
OCCURRENCE_STATUS: dict[str, str] = {
    "A": "absent",
    "Ex": "absent",
    "Excluded": "excluded",
    "I": "irregular",
    "M": "migrant",
    "P": "present",
    "P?": "doubtful",
    "P(I)": "irregular",
}

# Regional red-list code -> threatStatus
THREAT_STATUS: dict[str, str] = {
    "RE": "RE",
    "CR": "CR",
    "EN": "EN",
    "VU": "VU",
    "NT": "NT",
    "LC": "LC",
    "DD": "DD",
    "NE": "NE",
    "NtA": "NA",  # not applicable
    "NRLA": "",  # no red list available
    "R": "Rare",
    "Unknown": "unknown",
    "LC/NE": "NE",
}
