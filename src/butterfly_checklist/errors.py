"""Exceptions raised by the checklist pipeline.

Everything here aborts the run: no output table is written once one of these
is raised. Unmatched scientific names are not errors; they are returned in a
``ValidationReport`` instead.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping


class ChecklistError(Exception):
    """Base class for pipeline failures."""


class JoinCardinalityError(ChecklistError):
    """A lookup table has duplicate keys, so a left join fanned out."""

    def __init__(self, table: str, key: str, duplicates: Iterable[str], expected: int, actual: int):
        self.table = table
        self.key = key
        self.duplicates = sorted(duplicates)
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Join changed row count from {expected} to {actual}: "
            f"duplicate {key} in {table} table: {', '.join(self.duplicates) or '(none found)'}"
        )


class MissingColumnsError(ChecklistError):
    """A source table lacks columns the pipeline reads."""

    def __init__(self, table: str, missing: Iterable[str]):
        self.table = table
        self.missing = sorted(missing)
        super().__init__(f"{table} table is missing columns: {', '.join(self.missing)}")


class SourceNotFoundError(ChecklistError):
    """A source file is not present in the source directory."""


class UnmappedCodeError(ChecklistError):
    """Categorical codes were found that no vocabulary table covers."""

    def __init__(self, unmapped: Mapping[str, Mapping[str, int]]):
        self.unmapped = {field: dict(codes) for field, codes in unmapped.items()}
        details = "; ".join(
            f"{field}: {', '.join(sorted(codes))}" for field, codes in sorted(self.unmapped.items())
        )
        super().__init__(f"Unmapped codes found: {details}")
