"""Content-addressed taxon identifiers.

``taxon_id`` hashes the scientific name, so the same name gets the same id on
every run and ids do not shift when other taxa are added or removed. MD5 is
used as a fingerprint of a short string, not as a security control.
"""

from __future__ import annotations

import hashlib

import pandas as pd


def taxon_id(scientific_name: str, namespace: str) -> str:
    """Return ``"<namespace>:taxon:<md5 hex of scientific_name>"``."""
    digest = hashlib.md5(scientific_name.encode("utf-8")).hexdigest()  # noqa: S324
    return f"{namespace}:taxon:{digest}"


def identify_taxa(validated: pd.DataFrame, namespace: str) -> pd.DataFrame:
    """Return a copy of ``validated`` with a ``taxon_id`` column."""
    ids = {name: taxon_id(name, namespace) for name in validated["scientific_name"].unique()}
    return validated.assign(taxon_id=validated["scientific_name"].map(ids))
