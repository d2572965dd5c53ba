# merobase/validation/checks.py
from __future__ import annotations
import math
import re
from datetime import datetime
from typing import Any, Dict, List, Sequence, Tuple
from .types import (
    Check, FieldError, MISSING, WRONG_TYPE, OUT_OF_ENUM, OUT_OF_RANGE,
)

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def is_iso_date(value: Any) -> bool:
    if not isinstance(value, str) or not ISO_DATE.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def required_text(fields: Sequence[str]) -> Check:
    def _check(record: Dict[str, Any]) -> List[FieldError]:
        errors: List[FieldError] = []
        for f in fields:
            value = record.get(f)
            if value is None:
                errors.append(FieldError(f, MISSING, f"Required field '{f}' is missing."))
            elif not isinstance(value, str):
                errors.append(FieldError(f, WRONG_TYPE, f"'{f}' must be text, got {type(value).__name__}."))
        return errors
    _check.__name__ = f"required_text[{','.join(fields)}]"
    return _check

def optional_text(fields: Sequence[str]) -> Check:
    def _check(record: Dict[str, Any]) -> List[FieldError]:
        return [
            FieldError(f, WRONG_TYPE, f"'{f}' must be text, got {type(record[f]).__name__}.")
            for f in fields
            if record.get(f) is not None and not isinstance(record[f], str)
        ]
    _check.__name__ = f"optional_text[{','.join(fields)}]"
    return _check

def one_of(field: str, choices: Sequence[str]) -> Check:
    def _check(record: Dict[str, Any]) -> List[FieldError]:
        value = record.get(field)
        if value is None:
            return []
        if not isinstance(value, str):
            return [FieldError(field, WRONG_TYPE, f"'{field}' must be text, got {type(value).__name__}.")]
        if value not in choices:
            return [FieldError(field, OUT_OF_ENUM,
                               f"'{value}' is not a valid {field}; expected one of {', '.join(choices)}.")]
        return []
    _check.__name__ = f"one_of[{field}]"
    return _check

def positive_int(fields: Sequence[str]) -> Check:
    def _check(record: Dict[str, Any]) -> List[FieldError]:
        errors: List[FieldError] = []
        for f in fields:
            value = record.get(f)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(FieldError(f, WRONG_TYPE, f"'{f}' must be a whole number, got {value!r}."))
            elif value < 1:
                errors.append(FieldError(f, OUT_OF_RANGE, f"'{f}' must be >= 1, got {value}."))
        return errors
    _check.__name__ = f"positive_int[{','.join(fields)}]"
    return _check

def iso_date(field: str) -> Check:
    def _check(record: Dict[str, Any]) -> List[FieldError]:
        value = record.get(field)
        if value is None or is_iso_date(value):
            return []
        return [FieldError(field, WRONG_TYPE, f"Value {value!r} in {field} is not a date (YYYY-MM-DD).")]
    _check.__name__ = f"iso_date[{field}]"
    return _check

def coordinates(pairs: Sequence[Tuple[str, float]]) -> Check:
    """Coordinates come as a unit: all present or all absent, each within +/- its bound."""
    def _check(record: Dict[str, Any]) -> List[FieldError]:
        errors: List[FieldError] = []
        present = [f for f, _ in pairs if record.get(f) is not None]
        if present and len(present) < len(pairs):
            for f, _ in pairs:
                if f not in present:
                    errors.append(FieldError(
                        f, MISSING, f"'{f}' is required when {', '.join(present)} is given."))
        for f, bound in pairs:
            value = record.get(f)
            if value is None:
                continue
            if not _is_number(value):
                errors.append(FieldError(f, WRONG_TYPE, f"'{f}' must be a number, got {value!r}."))
            elif math.isnan(value) or not -bound <= value <= bound:
                errors.append(FieldError(f, OUT_OF_RANGE, f"'{f}' must be within [-{bound}, {bound}], got {value}."))
        return errors
    _check.__name__ = "coordinates"
    return _check
