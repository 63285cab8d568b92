"""Application settings.

Values come from environment variables prefixed with ``CHECKLIST_`` (or a
``.env`` file). Nested dataset metadata uses ``__`` as delimiter, e.g.
``CHECKLIST_DATASET__RIGHTS_HOLDER=INBO``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatasetMetadata(BaseModel):
    """Constant metadata stamped on every Taxon row.

    Changing the dataset identity only touches this structure, never the
    join or validation logic.
    """

    model_config = {"frozen": True}

    language: str = "en"
    license: str = "http://creativecommons.org/publicdomain/zero/1.0/"
    rights_holder: str = "Butterfly Conservation Europe"
    access_rights: str = "http://www.inbo.be/en/norms-for-data-use"
    dataset_id: str = "butterflies-europe"
    institution_code: str = "BC Europe"
    dataset_name: str = "Checklist of European butterflies"
    namespace: str = Field(
        default="butterflies-europe",
        description="Prefix for generated identifiers, e.g. '<namespace>:taxon:<hash>'",
    )


class Settings(BaseSettings):
    """Runtime configuration for the checklist pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="CHECKLIST_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app_name: str = "butterfly-checklist"
    app_env: str = "development"
    debug: bool = False

    data_dir: Path = Path("data")
    # Unset: read the tables the fetch flow saved under <data_dir>/raw
    source_dir: Path | None = None
    source_base_url: str | None = None
    source_ttl_days: int = 30

    # "warn" keeps the empty-string fallback for codes missing from the
    # vocabularies, "fail" aborts the run before any output is written.
    unmapped_code_policy: Literal["warn", "fail"] = "warn"

    dataset: DatasetMetadata = Field(default_factory=DatasetMetadata)

    @property
    def source_path(self) -> Path:
        """Directory the build reads the four source tables from."""
        return self.source_dir or self.data_dir / "raw"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
