"""
Sample schema: normalization plus field rules.

``validate`` never raises for bad input; it returns a ValidationResult that
either carries the normalized record or the list of FieldErrors. The record
store turns a failed result into a ValidationError.
"""
from __future__ import annotations
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Mapping

from merobase.core.legacy import digits_to_int, upgrade_record
from merobase.core.sample import (
    SAMPLE_FIELDS, KINGDOMS, PROJECT_TYPES, TEXT_FIELDS, today_iso,
)
from merobase.validation.checks import (
    required_text, optional_text, one_of, positive_int, iso_date, coordinates,
)
from merobase.validation.types import Check, FieldError, ValidationResult, WRONG_TYPE

logger = logging.getLogger(__name__)

CHECKS: List[Check] = [
    required_text(["sampleName"]),
    optional_text(TEXT_FIELDS),
    one_of("kingdom", KINGDOMS),
    one_of("projectType", PROJECT_TYPES),
    positive_int(["projectNumber", "sampleNumber"]),
    iso_date("collectionDate"),
    coordinates([("latitude", 90), ("longitude", 180)]),
]

def _coerce(field: str, value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
    if field in ("projectNumber", "sampleNumber"):
        return digits_to_int(value)
    elif field in ("latitude", "longitude"):
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return value
        if isinstance(value, int) and not isinstance(value, bool):
            return float(value)
    elif field == "collectionDate":
        if isinstance(value, datetime):
            return value.date().isoformat()
        if isinstance(value, date):
            return value.isoformat()
    return value

def normalize(candidate: Mapping[str, Any]) -> Dict[str, Any]:
    """Upgrade legacy keys, tidy values and put the record in canonical key order."""
    raw = upgrade_record(dict(candidate))
    dropped = sorted(set(raw) - set(SAMPLE_FIELDS))
    if dropped:
        logger.debug("Ignoring unknown sample keys: %s", ", ".join(dropped))
    record = {f: _coerce(f, raw.get(f)) for f in SAMPLE_FIELDS}
    if record["collectionDate"] is None:
        record["collectionDate"] = today_iso()
    return record

def validate(candidate: Mapping[str, Any]) -> ValidationResult:
    if not isinstance(candidate, Mapping):
        return ValidationResult(ok=False, violations=[
            FieldError("sample", WRONG_TYPE, f"Expected a mapping, got {type(candidate).__name__}."),
        ])
    record = normalize(candidate)
    violations: List[FieldError] = []
    for check in CHECKS:
        violations.extend(check(record))
    if violations:
        return ValidationResult(ok=False, violations=violations)
    return ValidationResult(ok=True, record=record)
