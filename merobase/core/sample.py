from __future__ import annotations
from typing import Dict, Any
from datetime import date, datetime, timezone

SAMPLE_FIELDS = (
    "sampleID",
    "sampleName",
    "species",
    "genus",
    "family",
    "kingdom",
    "projectType",
    "projectNumber",
    "sampleNumber",
    "collectionDate",
    "latitude",
    "longitude",
    "samplePhoto",
    "semPhoto",
    "isolatedPhoto",
    "lastUpdated",
)

KINGDOMS = (
    "Animalia", "Plantae", "Fungi", "Protista",
    "Archaea", "Bacteria", "Chromista", "Undecided",
)

PROJECT_TYPES = ("A", "B")

TEXT_FIELDS = ("species", "genus", "family", "samplePhoto", "semPhoto", "isolatedPhoto",
               "sampleID", "lastUpdated")

def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")

def today_iso() -> str:
    return date.today().isoformat()

def new_sample(**values: Any) -> Dict[str, Any]:
    """Blank record in canonical key order, with any given values filled in."""
    unknown = set(values) - set(SAMPLE_FIELDS)
    if unknown:
        raise KeyError(f"Unknown sample fields: {', '.join(sorted(unknown))}")
    record: Dict[str, Any] = {f: None for f in SAMPLE_FIELDS}
    record.update(values)
    return record
