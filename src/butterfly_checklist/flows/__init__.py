"""
Prefect flows for the checklist pipeline.

Flows:
- fetch: Download the four source tables into data/raw/ (when a base URL is set)
- build: Map the source tables to Darwin Core and write data/processed/

Usage (local):
    python -m butterfly_checklist.flows.fetch
    python -m butterfly_checklist.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'build-checklist/default'
"""
