"""Write the Darwin Core tables and the archive descriptor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from butterfly_checklist.exporters import render_template
from butterfly_checklist.exporters.terms import ROW_TYPES, term_uri
from butterfly_checklist.schemas import OUTPUT_COLUMNS, OutputTable

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

META_XML = "meta.xml"
CORE_TABLE = OutputTable.TAXON
CORE_ID_COLUMN = "taxonID"


def table_filename(table: OutputTable) -> str:
    """File name of an output table inside the archive."""
    return f"{table.value}.csv"


def write_table(frame: pd.DataFrame, path: Path, table: OutputTable) -> Path:
    """Write one output table as CSV in its fixed column order.

    Missing values are written as empty strings and lines end with ``\\n``
    so repeated runs on the same input give byte-identical files.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(
        path,
        columns=list(OUTPUT_COLUMNS[table]),
        index=False,
        na_rep="",
        encoding="utf-8",
        lineterminator="\n",
    )
    return path


def _file_descriptor(table: OutputTable) -> dict[str, Any]:
    columns = OUTPUT_COLUMNS[table]
    is_core = table is CORE_TABLE
    return {
        "element": "core" if is_core else "extension",
        "id_element": "id" if is_core else "coreid",
        "id_index": columns.index(CORE_ID_COLUMN),
        "row_type": ROW_TYPES[table],
        "location": table_filename(table),
        "fields": [
            {"index": i, "term": term_uri(column)}
            for i, column in enumerate(columns)
            if is_core or column != CORE_ID_COLUMN
        ],
    }


def build_meta_xml() -> str:
    """Render the archive descriptor listing the core and both extensions."""
    files = [_file_descriptor(table) for table in OutputTable]
    return render_template("meta.xml.j2", files=files)


def write_archive(tables: dict[OutputTable, pd.DataFrame], out_dir: Path) -> dict[str, Path]:
    """Write all output tables plus ``meta.xml`` to ``out_dir``.

    Returns:
        Mapping of written file name -> path.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    written: dict[str, Path] = {}
    for table, frame in tables.items():
        name = table_filename(table)
        written[name] = write_table(frame, out_dir / name, table)

    meta_path = out_dir / META_XML
    meta_path.write_text(build_meta_xml(), encoding="utf-8")
    written[META_XML] = meta_path
    return written
