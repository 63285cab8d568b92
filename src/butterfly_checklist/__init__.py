"""Butterfly Checklist - regional butterfly checklist to Darwin Core Archive.

Architecture::

    datasources/   Source feed (four raw CSV tables, optional HTTP fetch)
    store.py       Data directory tiers (raw → processed) with freshness sidecars
    reference/     Static vocabularies (status, red-list, region → Marine Regions)
    mapping/       Pure table transformations (join, validate, identify, project)
    pipeline.py    Composition of the mapping stages into one pure run
    exporters/     Output tables → delimited files + archive descriptor
    flows/         Prefect orchestration (fetch downloads sources, build maps them)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources → mapping → exporters → data/processed/

Extension points (see each package's docstring for step-by-step guides):
  - New vocabulary:    reference/__init__.py
  - New projection:    mapping/__init__.py
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from butterfly_checklist.config import DatasetMetadata, Settings
from butterfly_checklist.pipeline import ChecklistTables, run_pipeline

__all__ = ["ChecklistTables", "DatasetMetadata", "Settings", "__version__", "run_pipeline"]
