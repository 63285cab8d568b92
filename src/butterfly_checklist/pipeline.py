"""Compose the mapping stages into one pure checklist run.

``run_pipeline`` takes the four raw tables and returns the three Darwin Core
tables plus an audit. It performs no I/O: flows/build.py loads the inputs and
hands the result to the exporter. Any fatal error is raised before a single
output table exists, so a failed run never yields partial output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from butterfly_checklist.config import DatasetMetadata
from butterfly_checklist.mapping import (
    ValidationReport,
    aggregate_references,
    check_unmapped_codes,
    identify_taxa,
    join_records,
    project_distribution,
    project_taxon,
    project_vernacular_names,
    validate_taxa,
)
from butterfly_checklist.schemas import OutputTable, RunSummary, SourceTable, require_columns

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ChecklistTables:
    """Output of one pipeline run."""

    taxon: pd.DataFrame
    distribution: pd.DataFrame
    vernacular_name: pd.DataFrame
    report: ValidationReport
    summary: RunSummary

    def tables(self) -> dict[OutputTable, pd.DataFrame]:
        """Output tables keyed by archive file name."""
        return {
            OutputTable.TAXON: self.taxon,
            OutputTable.DISTRIBUTION: self.distribution,
            OutputTable.VERNACULAR_NAME: self.vernacular_name,
        }


def run_pipeline(
    distribution: pd.DataFrame,
    taxa: pd.DataFrame,
    regions: pd.DataFrame,
    references: pd.DataFrame,
    metadata: DatasetMetadata | None = None,
    unmapped_code_policy: Literal["warn", "fail"] = "warn",
) -> ChecklistTables:
    """Map raw checklist tables to Taxon, Distribution and VernacularName.

    Args:
        distribution: Raw distribution records.
        taxa: Raw taxon records (one per accepted taxon).
        regions: Raw region records.
        references: Raw reference records.
        metadata: Dataset metadata for the Taxon table (defaults apply if None).
        unmapped_code_policy: ``"warn"`` logs unmapped codes, ``"fail"`` raises.

    Raises:
        MissingColumnsError: An input lacks required columns.
        JoinCardinalityError: Taxon or region keys are not unique.
        UnmappedCodeError: Unmapped codes exist and the policy is ``"fail"``.
    """
    metadata = metadata or DatasetMetadata()
    for table, frame in (
        (SourceTable.DISTRIBUTION, distribution),
        (SourceTable.TAXA, taxa),
        (SourceTable.REGIONS, regions),
        (SourceTable.REFERENCES, references),
    ):
        require_columns(frame, table)

    aggregated = aggregate_references(references)
    enriched = join_records(distribution, taxa, regions, aggregated)
    validated, report = validate_taxa(enriched)
    identified = identify_taxa(validated, metadata.namespace)
    unmapped = check_unmapped_codes(identified, unmapped_code_policy)

    taxon = project_taxon(identified, metadata)
    distribution_out = project_distribution(identified)
    vernacular = project_vernacular_names(identified)

    summary = RunSummary(
        distribution_records=len(distribution),
        excluded_records=report.count,
        taxa=len(taxon),
        distributions=len(distribution_out),
        vernacular_names=len(vernacular),
        unmapped_codes=unmapped,
    )
    logger.info(
        "Mapped %d taxa, %d distributions, %d vernacular names",
        summary.taxa,
        summary.distributions,
        summary.vernacular_names,
    )
    return ChecklistTables(
        taxon=taxon,
        distribution=distribution_out,
        vernacular_name=vernacular,
        report=report,
        summary=summary,
    )
