"""Static checklist vocabularies.

Reference data that never changes with a data refresh: occurrence-status and
red-list translations, pseudo-regions, and Marine Regions identifiers for the
Macaronesian islands.

Every table is an explicit ``code -> value`` mapping paired with a documented
default for codes it does not list. Keep it that way: no conditional cascades,
so the vocabulary stays auditable in one place.

Adding a vocabulary:
1. Create ``reference/{name}.py`` with the mapping and its default
2. Re-export from this ``__init__.py``
3. Use it from ``mapping/translate.py`` and extend ``find_unmapped_codes``
"""

from butterfly_checklist.reference.regions import ARCHIPELAGOS as ARCHIPELAGOS
from butterfly_checklist.reference.regions import ISO_3166_PREFIX as ISO_3166_PREFIX
from butterfly_checklist.reference.regions import MARINE_REGION_URIS as MARINE_REGION_URIS
from butterfly_checklist.reference.regions import PSEUDO_REGIONS as PSEUDO_REGIONS
from butterfly_checklist.reference.vocabularies import OCCURRENCE_STATUS as OCCURRENCE_STATUS
from butterfly_checklist.reference.vocabularies import THREAT_STATUS as THREAT_STATUS
from butterfly_checklist.reference.vocabularies import UNMAPPED as UNMAPPED
