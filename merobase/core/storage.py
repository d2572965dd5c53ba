from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as SchemaValidationError

from merobase.core import config
from merobase.core.errors import PersistenceCorruptError
from merobase.schemas.sample_document import DOCUMENT_SCHEMA

_DOCUMENT_VALIDATOR = Draft202012Validator(DOCUMENT_SCHEMA)

class SlotStorage(Protocol):
    """Key-value surface holding one serialized document per key."""
    def read(self, key: str) -> Optional[str]:
        ...
    def write(self, key: str, text: str) -> None:
        ...

class JsonFileStorage:
    def __init__(self, data_dir: Path | None = None):
        self.data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def slot_path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self.slot_path(key)
        if path.exists():
            return path.read_text(encoding="utf-8")
        return None

    def write(self, key: str, text: str) -> None:
        self.slot_path(key).write_text(text, encoding="utf-8")

class MemoryStorage:
    """In-process slots, for tests and embedding."""
    def __init__(self, slots: Dict[str, str] | None = None):
        self.slots: Dict[str, str] = dict(slots or {})

    def read(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def write(self, key: str, text: str) -> None:
        self.slots[key] = text

def default_storage() -> JsonFileStorage:
    return JsonFileStorage(config.DATA_DIR)

def encode_document(records: List[Dict[str, Any]]) -> str:
    return json.dumps(records, indent=2, ensure_ascii=False)

def decode_document(key: str, text: str) -> List[Dict[str, Any]]:
    """Parse a stored document; anything that is not an array of objects is corrupt."""
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise PersistenceCorruptError(key, f"invalid JSON ({e.msg} at line {e.lineno})") from e
    try:
        _DOCUMENT_VALIDATOR.validate(doc)
    except SchemaValidationError as e:
        raise PersistenceCorruptError(key, e.message) from e
    return doc
