"""
Prefect flow for mapping the source tables to a Darwin Core Archive.

Loads the four raw tables, runs the pure mapping pipeline and writes the
Taxon, Distribution and VernacularName tables plus ``meta.xml`` to
``processed/``. A fatal mapping error fails the flow before anything is written.

Run locally:
    python -m butterfly_checklist.flows.build
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from prefect import flow, task
from prefect.cache_policies import NONE

from butterfly_checklist.config import DatasetMetadata, get_settings
from butterfly_checklist.datasources.checklist import SourceTables, load_tables
from butterfly_checklist.exporters.dwca import write_archive
from butterfly_checklist.pipeline import ChecklistTables, run_pipeline
from butterfly_checklist.store import DataStore

# Store and output paths
store = DataStore(get_settings().data_dir)
SUMMARY_PATH = Path("processed/summary.json")


@task(name="load-sources")
def load_sources(source_dir: Path) -> SourceTables:
    """Load the four raw tables from CSV."""
    return load_tables(source_dir)


@task(name="map-checklist", cache_policy=NONE)
def map_checklist(
    sources: SourceTables,
    metadata: DatasetMetadata,
    policy: Literal["warn", "fail"],
) -> ChecklistTables:
    """Run the mapping pipeline over the loaded tables."""
    return run_pipeline(
        sources.distribution,
        sources.taxa,
        sources.regions,
        sources.references,
        metadata=metadata,
        unmapped_code_policy=policy,
    )


@task(name="write-archive", cache_policy=NONE)
def write_outputs(result: ChecklistTables) -> dict[str, Path]:
    """Write the output tables and archive descriptor."""
    return write_archive(result.tables(), store.processed)


@task(name="write-summary", cache_policy=NONE)
def write_summary(result: ChecklistTables) -> Path:
    """Record row counts, excluded names and unmapped codes for review."""
    return store.write(
        SUMMARY_PATH,
        {
            **result.summary.model_dump(),
            "excluded": result.report.excluded.fillna("").to_dict(orient="records"),
        },
        source="butterfly-checklist",
    )


@flow(name="build-checklist", log_prints=True)
def build_all(
    source_dir: Path | None = None,
    strict: bool | None = None,
) -> dict[str, Any]:
    """
    Build the Darwin Core Archive from the source tables.

    Args:
        source_dir: Directory with the four CSV files (default: ``Settings.source_path``).
        strict: Fail on unmapped codes (default: ``Settings.unmapped_code_policy``).
    """
    settings = get_settings()
    source_dir = source_dir or settings.source_path
    policy: Literal["warn", "fail"] = settings.unmapped_code_policy
    if strict is not None:
        policy = "fail" if strict else "warn"

    print(f"Loading source tables from {source_dir}...")
    sources = load_sources(source_dir)
    print(
        f"Loaded {len(sources.distribution)} distribution records, "
        f"{len(sources.taxa)} taxa, {len(sources.regions)} regions, "
        f"{len(sources.references)} references"
    )

    print("Mapping checklist...")
    result = map_checklist(sources, settings.dataset, policy)

    if result.report.count:
        print(
            f"Warning: excluded {result.report.count} records with no accepted taxon: "
            f"{', '.join(result.report.names)}"
        )
    for column, codes in result.summary.unmapped_codes.items():
        print(f"Warning: unmapped {column} codes: {', '.join(codes)}")

    print("Writing archive...")
    written = write_outputs(result)
    summary_path = write_summary(result)

    print(f"Archive built: {store.processed}")
    return {
        **result.summary.model_dump(),
        "files": sorted(written),
        "summary": str(summary_path),
    }


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
