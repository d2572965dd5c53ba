# merobase/validation/types.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

MISSING = "Missing"
WRONG_TYPE = "WrongType"
OUT_OF_ENUM = "OutOfEnum"
OUT_OF_RANGE = "OutOfRange"

REASONS = (MISSING, WRONG_TYPE, OUT_OF_ENUM, OUT_OF_RANGE)

@dataclass
class FieldError:
    field: str                # sample key the problem is about, e.g. "kingdom"
    reason: str               # one of REASONS
    message: str = ""         # human summary ("kingdom 'Monera' is not a known kingdom")

@dataclass
class ValidationResult:
    ok: bool
    record: Optional[Dict[str, Any]] = None
    violations: List[FieldError] = field(default_factory=list)

@dataclass
class AuditItem:
    column: str
    check: str
    failure: str
    index: int

# A Check looks at one normalized record and returns the problems it found.
Check = Callable[[Dict[str, Any]], List[FieldError]]
