"""
catalog.py
--------------------
Device catalog: a directory tree of JSON device descriptions.

    devices/
        blackmagic/atem_mini.json      ← skipped (contains "_")
        blackmagic/hyperdeck.json
        _template.json                 ← skipped

Any file whose path relative to the catalog root contains an underscore is
treated as a template or draft and ignored. Entries are sorted
case-insensitively by vendor, then model.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .constants import DEVICE_SUFFIX, EXCLUDED_MARKER
from .exceptions import CatalogError, DeviceNotFound
from .models import Device


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One device file with the header fields needed for selection."""

    path: Path
    vendor: str
    model: str

    def sort_key(self) -> tuple[str, str]:
        return self.vendor.lower(), self.model.lower()


@dataclass
class Catalog:
    """Sorted catalog entries plus the files that could not be indexed."""

    root: Path
    entries: list[CatalogEntry] = field(default_factory=list)
    skipped: list[tuple[Path, str]] = field(default_factory=list)

    def vendors(self) -> list[str]:
        """Unique vendor names in catalog order."""
        return list(dict.fromkeys(e.vendor for e in self.entries))

    def models(self, vendor: str) -> list[str]:
        return [e.model for e in self.entries if e.vendor == vendor]

    def resolve(self, vendor: str, model: str) -> CatalogEntry:
        for entry in self.entries:
            if entry.vendor == vendor and entry.model == model:
                return entry
        raise DeviceNotFound(vendor, model)

    def __len__(self) -> int:
        return len(self.entries)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Cannot read {path}: {exc}") from exc


def _is_device_file(rel: Path) -> bool:
    return rel.suffix == DEVICE_SUFFIX and EXCLUDED_MARKER not in rel.as_posix()


def discover(devices_dir: Path) -> Catalog:
    """Index every device file under ``devices_dir``."""
    devices_dir = Path(devices_dir)
    if not devices_dir.is_dir():
        raise CatalogError(f"Devices directory not found: {devices_dir}")

    catalog = Catalog(root=devices_dir)
    for path in sorted(devices_dir.rglob(f"*{DEVICE_SUFFIX}")):
        if not path.is_file() or not _is_device_file(path.relative_to(devices_dir)):
            continue
        try:
            data = _read_json(path)
        except CatalogError as exc:
            catalog.skipped.append((path, str(exc)))
            continue
        options = data.get("options") if isinstance(data, dict) else None
        if not isinstance(options, dict) or not options.get("vendor") or not options.get("model"):
            catalog.skipped.append((path, "missing options.vendor or options.model"))
            continue
        catalog.entries.append(
            CatalogEntry(path=path, vendor=str(options["vendor"]), model=str(options["model"]))
        )

    catalog.entries.sort(key=CatalogEntry.sort_key)
    return catalog


def load_device(path: Path) -> Device:
    """Read and validate one device description."""
    path = Path(path)
    return Device.from_dict(_read_json(path), source=str(path))
