"""Tests for code translation and the unmapped-code audit."""

from __future__ import annotations

import logging

import pandas as pd
import pytest

from butterfly_checklist.errors import UnmappedCodeError
from butterfly_checklist.mapping.translate import (
    as_text,
    check_unmapped_codes,
    find_unmapped_codes,
    locality,
    location_id,
    occurrence_status,
    threat_status,
)
from butterfly_checklist.reference import MARINE_REGION_URIS
from butterfly_checklist.reference.regions import archipelago_of


class TestAsText:
    @pytest.mark.parametrize("value", [None, float("nan"), pd.NA])
    def test_missing_is_empty(self, value: object) -> None:
        assert as_text(value) == ""

    def test_string_unchanged(self) -> None:
        assert as_text("BE") == "BE"


class TestOccurrenceStatus:
    """Test status code -> occurrenceStatus."""

    @pytest.mark.parametrize(
        ("code", "term"),
        [
            ("A", "absent"),
            ("Ex", "absent"),
            ("Excluded", "excluded"),
            ("I", "irregular"),
            ("M", "migrant"),
            ("P", "present"),
            ("P?", "doubtful"),
            ("P(I)", "irregular"),
        ],
    )
    def test_mapped(self, code: str, term: str) -> None:
        assert occurrence_status(code) == term

    @pytest.mark.parametrize("code", ["Q", "", None, "p"])
    def test_unmapped_is_empty(self, code: str | None) -> None:
        assert occurrence_status(code) == ""


class TestThreatStatus:
    """Test red-list code -> threatStatus."""

    @pytest.mark.parametrize("code", ["RE", "CR", "EN", "VU", "NT", "LC", "DD", "NE"])
    def test_standard_codes_pass_through(self, code: str) -> None:
        assert threat_status(code) == code

    @pytest.mark.parametrize(
        ("code", "term"),
        [("NtA", "NA"), ("NRLA", ""), ("R", "Rare"), ("Unknown", "unknown"), ("LC/NE", "NE")],
    )
    def test_informal_codes(self, code: str, term: str) -> None:
        assert threat_status(code) == term

    @pytest.mark.parametrize("code", ["EX", None, "xx"])
    def test_unmapped_is_empty(self, code: str | None) -> None:
        assert threat_status(code) == ""


class TestLocationId:
    """Test region code -> locationID."""

    def test_island(self) -> None:
        assert location_id("MA_AZ_Corvo", "Corvo") == "http://marineregions.org/mrgid/2462"

    def test_country(self) -> None:
        assert location_id("BE", None) == "ISO_3166:BE"

    @pytest.mark.parametrize("code", ["EUR", "EU28"])
    def test_pseudo_region_has_no_identifier(self, code: str) -> None:
        assert location_id(code, None) == ""

    def test_named_region_outside_table(self) -> None:
        assert location_id("IT_SI", "Sicily") == ""

    def test_code_without_region_row(self) -> None:
        assert location_id("ES_XX", None, region_matched=False) == ""

    def test_tables_apply_without_region_row(self) -> None:
        assert location_id("EUR", None, region_matched=False) == ""
        assert location_id("MA_AZ_Corvo", None, region_matched=False) == MARINE_REGION_URIS[
            "MA_AZ_Corvo"
        ]

    def test_marine_table_covers_three_archipelagos(self) -> None:
        prefixes = {code[:5] for code in MARINE_REGION_URIS}
        assert prefixes == {"MA_AZ", "MA_CA", "MA_MD"}
        prefix = "http://marineregions.org/mrgid/"
        assert all(uri.startswith(prefix) for uri in MARINE_REGION_URIS.values())


class TestLocality:
    """Test region code -> locality text."""

    def test_island_prefixed_with_archipelago(self) -> None:
        assert locality("MA_AZ_Corvo", "Corvo", "Portugal") == "Azores, Corvo"
        assert locality("MA_CA_Tenerife", "Tenerife", "Spain") == "Canary Islands, Tenerife"

    def test_country_uses_country_name(self) -> None:
        assert locality("BE", None, "Belgium") == "Belgium"

    def test_region_uses_region_name(self) -> None:
        assert locality("IT_SI", "Sicily", "Italy") == "Sicily"

    def test_archipelago_level_code_uses_region_name(self) -> None:
        assert locality("MA_AZ", "Azores", "Portugal") == "Azores"

    def test_pseudo_region_uses_label(self) -> None:
        assert locality("EUR", None, None) == "Europe"

    def test_archipelago_of(self) -> None:
        assert archipelago_of("MA_MD_PortoSanto") == "Madeira"
        assert archipelago_of("MA_AZ") is None
        assert archipelago_of("BE") is None


def make_records(
    rows: list[tuple[str | None, str | None, str | None, str | None]],
    unmatched: tuple[str, ...] = (),
) -> pd.DataFrame:
    """Joined records; codes in ``unmatched`` found no region row."""
    records = pd.DataFrame(rows, columns=["status", "rlc", "region_code", "region_name"])
    return records.assign(region_matched=~records["region_code"].isin(unmatched))


class TestFindUnmappedCodes:
    """Test the audit of codes missing from the vocabularies."""

    def test_all_mapped(self) -> None:
        records = make_records(
            [
                ("P", "LC", "BE", None),
                ("M", None, "MA_AZ_Corvo", "Corvo"),
                ("A", "NtA", "EUR", None),
            ]
        )
        assert find_unmapped_codes(records) == {}

    def test_counts_unmapped_per_column(self) -> None:
        records = make_records(
            [
                ("Q", "LC", "BE", None),
                ("Q", "XX", "IT_SI", "Sicily"),
                ("P", None, "IT_SI", "Sicily"),
            ]
        )
        assert find_unmapped_codes(records) == {
            "status": {"Q": 2},
            "rlc": {"XX": 1},
            "region_code": {"IT_SI": 2},
        }

    def test_missing_codes_not_reported(self) -> None:
        records = make_records([(None, None, "BE", None), ("", "", "BE", None)])
        assert find_unmapped_codes(records) == {}

    def test_region_code_without_row_reported(self) -> None:
        records = make_records(
            [("P", "LC", "ES_XX", None), ("P", "LC", "BE", None), ("P", "LC", "ES_XX", None)],
            unmatched=("ES_XX",),
        )
        assert find_unmapped_codes(records) == {"region_code": {"ES_XX": 2}}

    def test_missing_region_code_not_reported(self) -> None:
        records = make_records([("P", "LC", None, None)]).assign(region_matched=False)
        assert find_unmapped_codes(records) == {}


class TestCheckUnmappedCodes:
    """Test the warn/fail policy."""

    def test_warn_logs_and_returns(self, caplog: pytest.LogCaptureFixture) -> None:
        records = make_records([("Q", None, "BE", None)])
        with caplog.at_level(logging.WARNING, logger="butterfly_checklist.mapping.translate"):
            result = check_unmapped_codes(records, "warn")
        assert result == {"status": {"Q": 1}}
        assert "Unmapped status code 'Q'" in caplog.text

    def test_fail_raises(self) -> None:
        records = make_records([("P", "XX", "BE", None)])
        with pytest.raises(UnmappedCodeError, match="rlc: XX") as excinfo:
            check_unmapped_codes(records, "fail")
        assert excinfo.value.unmapped == {"rlc": {"XX": 1}}

    def test_fail_passes_when_clean(self) -> None:
        records = make_records([("P", "LC", "BE", None)])
        assert check_unmapped_codes(records, "fail") == {}
