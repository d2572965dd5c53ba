"""
Upgrade sample records written by earlier revisions of the app.

Older pages stored samples as ``{"id", "name", "date", "location": "lat, lng"}``
and kept project/sample numbers as the raw form text. ``upgrade_record`` maps
those keys onto the current field names so the schema only ever sees one shape.
"""
from __future__ import annotations
import logging
import re
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

# legacy key -> current key; current keys win when both are present
RENAMES = (
    ("id", "sampleID"),
    ("name", "sampleName"),
    ("dateAcquired", "collectionDate"),
    ("date", "collectionDate"),
)

def parse_location(text: Any) -> Optional[Tuple[float, float]]:
    """Parse a ``"lat, lng"`` string. Returns None when it is not two numbers."""
    if not isinstance(text, str):
        return None
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        return None
    try:
        lat, lng = float(parts[0]), float(parts[1])
    except ValueError:
        return None
    return lat, lng

WHOLE_NUMBER = re.compile(r"\d+", re.ASCII)

def digits_to_int(value: Any) -> Any:
    """Turn an ASCII digit string into an int; anything else is returned unchanged."""
    if isinstance(value, str) and WHOLE_NUMBER.fullmatch(value.strip()):
        return int(value.strip())
    return value

def upgrade_record(raw: Dict[str, Any]) -> Dict[str, Any]:
    record = dict(raw)
    for old, new in RENAMES:
        if old in record:
            value = record.pop(old)
            if record.get(new) in (None, ""):
                record[new] = value

    location = record.pop("location", None)
    if location and record.get("latitude") is None and record.get("longitude") is None:
        coords = parse_location(location)
        if coords is None:
            logger.debug("Dropping unparsable legacy location %r", location)
        else:
            record["latitude"], record["longitude"] = coords

    for f in ("projectNumber", "sampleNumber"):
        if f in record:
            record[f] = digits_to_int(record[f])
    return record
