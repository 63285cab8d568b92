"""Export sink: output tables -> Darwin Core Archive files.

Exporters take the frames produced by ``pipeline.run_pipeline`` and write
them to disk; they never change row content. Column order comes from
``schemas.OUTPUT_COLUMNS`` and missing values are written as empty strings.

Public API:
  - dwca: write_archive, write_table, build_meta_xml
  - terms: TERM_URIS, ROW_TYPES
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for archive descriptors
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=jinja2.select_autoescape(["xml", "xml.j2"]),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
