from __future__ import annotations
from typing import Any, List, Mapping, Optional

from merobase.core.errors import IdentifierError

KEY_FIELDS = ("projectType", "projectNumber", "sampleNumber")
ID_FIELDS = KEY_FIELDS + ("semPhoto", "isolatedPhoto")

# suffix order is fixed: SEM always comes before ISO
SUFFIXES = (("semPhoto", "SEM"), ("isolatedPhoto", "ISO"))

def _present(value: Any) -> bool:
    return value is not None and value != ""

def missing_key_fields(record: Mapping[str, Any]) -> List[str]:
    return [f for f in KEY_FIELDS if not _present(record.get(f))]

def generate_id(record: Mapping[str, Any]) -> Optional[str]:
    """Derive the sampleID, e.g. ``A12-3-SEM-ISO``. None when a key field is absent."""
    if missing_key_fields(record):
        return None
    sample_id = f"{record['projectType']}{record['projectNumber']}-{record['sampleNumber']}"
    suffixes = [tag for field, tag in SUFFIXES if _present(record.get(field))]
    if suffixes:
        sample_id += "-" + "-".join(suffixes)
    return sample_id

def require_id(record: Mapping[str, Any]) -> str:
    sample_id = generate_id(record)
    if sample_id is None:
        raise IdentifierError(missing_key_fields(record))
    return sample_id

def id_inputs_changed(before: Mapping[str, Any], after: Mapping[str, Any]) -> bool:
    return any(before.get(f) != after.get(f) for f in ID_FIELDS)
