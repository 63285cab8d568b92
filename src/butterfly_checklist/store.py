"""Data directory with freshness-aware source caching.

Files are organized into two tiers:
  - raw/: Source tables as fetched (CSV), 30-day TTL by default
  - processed/: Pipeline outputs (Darwin Core tables, run summary), always recomputed

Source files keep their native CSV format; freshness metadata lives in a
sidecar ``.meta.json`` written next to them so the fetch flow can skip
sources that are still valid. JSON outputs are wrapped in a metadata
envelope instead.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003
from typing import Any


class DataStore:
    """Manages the raw and processed data tiers."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.raw = base_dir / "raw"
        self.processed = base_dir / "processed"

    def read(self, path: Path) -> Any | None:
        """Read the ``data`` payload of a metadata-enveloped JSON file.

        Returns None if the file doesn't exist.
        """
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        return envelope.get("data", envelope)

    def write(self, path: Path, data: Any, source: str, **params: Any) -> Path:
        """Write JSON data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``processed/summary.json``).
            data: Payload to store under the ``data`` key.
            source: Producer identifier (e.g. ``"butterfly-checklist"``).
            **params: Extra metadata fields.

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta = self._meta(source, None, params)
        with full.open("w") as f:
            json.dump({"meta": meta, "data": data}, f, indent=2)
        return full

    def write_bytes(
        self,
        path: Path,
        content: bytes,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Store a fetched source file with sidecar metadata.

        Args:
            path: Relative destination path (e.g. ``raw/distribution.csv``).
            content: File content as downloaded.
            source: Source URL or identifier.
            valid_until: Expiry timestamp.
            **params: Extra metadata fields.

        Returns:
            Absolute path of the stored file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)
        full.write_bytes(content)

        meta_path = full.with_suffix(full.suffix + ".meta.json")
        with meta_path.open("w") as f:
            json.dump({"meta": self._meta(source, valid_until, params)}, f, indent=2)

        return full

    def file_path(self, path: Path) -> Path | None:
        """Return the absolute path of a stored file, or None if missing."""
        full = self._resolve(path)
        return full if full.exists() else None

    def _meta(
        self, source: str, valid_until: datetime | None, params: dict[str, Any]
    ) -> dict[str, Any]:
        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        meta.update(params)
        return meta

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full

    def _read_meta(self, full: Path) -> dict[str, Any]:
        """Read metadata from either a sidecar .meta.json or a JSON envelope."""
        sidecar = full.with_suffix(full.suffix + ".meta.json")
        if sidecar.exists():
            with sidecar.open() as f:
                result: dict[str, Any] = json.load(f)
            return result.get("meta", {})

        if full.suffix == ".json" and full.exists():
            with full.open() as f:
                envelope: dict[str, Any] = json.load(f)
            return envelope.get("meta", {})

        return {}

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        full = self._resolve(path)
        if not full.exists():
            return False

        valid_until = self._read_meta(full).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry
