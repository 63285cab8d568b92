"""Pure table transformations: raw checklist tables -> Darwin Core tables.

Each module is one stage. Every stage takes pandas DataFrames and returns new
ones; inputs are never modified in place, so each intermediate snapshot can be
inspected and tested on its own.

Stages, in pipeline order:
  - references: reference table -> one citation string per region
  - join: distribution + taxa + regions + references -> enriched records
  - validation: enriched -> validated records + report of excluded names
  - identifiers: validated -> identified records (adds ``taxon_id``)
  - translate: code -> vocabulary term, plus the unmapped-code audit
  - projections: identified -> Taxon, Distribution, VernacularName

Dependency rule: mapping/ imports from reference/ and schemas only.
No I/O, no HTTP, no Prefect decorators.

Adding a projection
-------------------
1. Declare the output columns in ``schemas.py`` (``OUTPUT_COLUMNS``).
2. Add a ``project_{name}(identified)`` function to ``projections.py`` that
   returns a string-valued frame with exactly those columns.
3. Call it from ``pipeline.run_pipeline`` and add it to ``ChecklistTables``.
4. Add tests in ``tests/test_projections.py``.
"""

from butterfly_checklist.mapping.identifiers import identify_taxa, taxon_id
from butterfly_checklist.mapping.join import join_records
from butterfly_checklist.mapping.projections import (
    project_distribution,
    project_taxon,
    project_vernacular_names,
)
from butterfly_checklist.mapping.references import REFERENCE_SEPARATOR, aggregate_references
from butterfly_checklist.mapping.translate import (
    check_unmapped_codes,
    find_unmapped_codes,
    locality,
    location_id,
    occurrence_status,
    threat_status,
)
from butterfly_checklist.mapping.validation import ValidationReport, validate_taxa

__all__ = [
    "REFERENCE_SEPARATOR",
    "ValidationReport",
    "aggregate_references",
    "check_unmapped_codes",
    "find_unmapped_codes",
    "identify_taxa",
    "join_records",
    "locality",
    "location_id",
    "occurrence_status",
    "project_distribution",
    "project_taxon",
    "project_vernacular_names",
    "taxon_id",
    "threat_status",
    "validate_taxa",
]
