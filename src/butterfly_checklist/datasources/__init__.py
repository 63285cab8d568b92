"""Source feed integrations.

    datasources/checklist/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # File names, URL construction
    ├── download.py       # HTTP download of the source tables
    └── tables.py         # CSV -> DataFrame loading with column checks

The feed supplies four raw tables (distribution, taxa, regions, references).
Loaders return pandas DataFrames with string values and missing cells as NA;
they never transform data beyond sorting for reproducible output.
"""
