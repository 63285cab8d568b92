"""Shared fixtures: a small checklist covering every mapping rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd
import pytest
from prefect.testing.utilities import prefect_test_harness

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def distribution() -> pd.DataFrame:
    """Distribution records, deliberately out of order, one unmatched name."""
    return pd.DataFrame(
        [
            ["Vanessa atalanta", "Vanessa atalanta", "MA_AZ_Corvo", "M", None, None],
            ["Papilio fakeus", "Papilio fakeus", "BE", "P?", None, "Single old record"],
            ["Vanessa atalanta", "Vanessa atalanta", "BE", "P", "LC", None],
            ["Pyrameis atalanta", "Vanessa atalanta", "IT_SI", "P", "NT", None],
            ["Pieris rapae", "Pieris rapae", "EUR", "P", "LC", None],
            ["Pieris rapae", "Pieris rapae", "BE", "P", "LC", None],
        ],
        columns=[
            "scientific_name_regional",
            "scientific_name",
            "region_code",
            "status",
            "rlc",
            "comments",
        ],
    )


@pytest.fixture
def taxa() -> pd.DataFrame:
    return pd.DataFrame(
        [
            [
                "Pieris rapae",
                "Pieridae",
                "Pieris",
                "rapae",
                "(Linnaeus, 1758)",
                "Small White",
                "Pierinae",
            ],
            [
                "Vanessa atalanta",
                "Nymphalidae",
                "Vanessa",
                "atalanta",
                "(Linnaeus, 1758)",
                "Red Admiral (suggestion)",
                "Nymphalinae",
            ],
        ],
        columns=[
            "scientific_name",
            "family",
            "genus",
            "specific_epithet",
            "authorship",
            "english_name",
            "subfamily",
        ],
    )


@pytest.fixture
def regions() -> pd.DataFrame:
    return pd.DataFrame(
        [
            ["BE", None, "BE", "Belgium"],
            ["EUR", None, None, None],
            ["IT_SI", "Sicily", "IT", "Italy"],
            ["MA_AZ_Corvo", "Corvo", "PT", "Portugal"],
        ],
        columns=["region_code", "region_name", "country_code", "country_name"],
    )


@pytest.fixture
def references() -> pd.DataFrame:
    return pd.DataFrame(
        [
            ["BE", "Smith 2010", "species"],
            ["BE", "Smith 2010", "redlist"],
            ["BE", "Jones 2020", "species"],
            ["MA_AZ_Corvo", "Azores list 2015", "species"],
        ],
        columns=["region_code", "citation", "citation_type"],
    )


def _write_csv(path: Path, frame: pd.DataFrame) -> None:
    frame.to_csv(path, index=False, na_rep="")


@pytest.fixture
def source_dir(
    tmp_path: Path,
    distribution: pd.DataFrame,
    taxa: pd.DataFrame,
    regions: pd.DataFrame,
    references: pd.DataFrame,
) -> Path:
    """The sample checklist written as the four source CSV files."""
    directory = tmp_path / "raw"
    directory.mkdir()
    _write_csv(directory / "distribution.csv", distribution)
    _write_csv(directory / "taxa.csv", taxa)
    _write_csv(directory / "regions.csv", regions)
    _write_csv(directory / "references.csv", references)
    return directory


@pytest.fixture(scope="session")
def prefect_harness() -> Iterator[None]:
    """Run flows against a temporary Prefect backend."""
    with prefect_test_harness():
        yield
