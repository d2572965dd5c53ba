"""
Record store: the single source of truth for samples.

The store keeps an in-memory, insertion-ordered cache of the collection and
mirrors it to one slot of a SlotStorage. Call ``load()`` once at startup;
every ``create``/``update`` writes the whole collection back with ``save()``.
There is no locking, so callers must not run two writers against one slot.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from merobase.core import config
from merobase.core.errors import (
    DuplicateIDError, NotFoundError, PersistenceCorruptError, ValidationError,
)
from merobase.core.identifier import id_inputs_changed, require_id
from merobase.core.legacy import upgrade_record
from merobase.core.sample import SAMPLE_FIELDS, now_iso
from merobase.core.schema import validate
from merobase.core.storage import SlotStorage, decode_document, encode_document
from merobase.validation.audit import audit_samples
from merobase.validation.types import AuditItem, FieldError, WRONG_TYPE

logger = logging.getLogger(__name__)

# Derived fields a caller may not set directly.
DERIVED_FIELDS = ("sampleID", "lastUpdated")

class RecordStore:
    def __init__(
        self,
        storage: SlotStorage,
        key: Optional[str] = None,
        clock: Callable[[], str] = now_iso,
    ):
        self.storage = storage
        self.key = key or config.SLOT_KEY
        self.clock = clock
        self._samples: List[Dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self._samples)

    # --- persistence ---

    def load(self) -> List[Dict[str, Any]]:
        """Replace the cache with the stored collection. Missing or corrupt slots load as empty."""
        text = self.storage.read(self.key)
        if text is None:
            logger.info("No stored samples under '%s'; starting empty", self.key)
            self._samples = []
            return self.list()
        try:
            raw = decode_document(self.key, text)
        except PersistenceCorruptError as e:
            logger.warning("%s; starting with an empty collection", e)
            self._samples = []
            return self.list()

        self._samples = [_canonical(upgrade_record(r)) for r in raw]
        logger.info("Loaded %d samples from '%s'", len(self._samples), self.key)
        for item in self.audit():
            logger.warning("Stored sample %d fails %s on %s: %s",
                           item.index, item.check, item.column, item.failure)
        return self.list()

    def save(self) -> None:
        self.storage.write(self.key, encode_document(self._samples))

    def _commit(self, samples: List[Dict[str, Any]]) -> None:
        """Write the new collection first; the cache only changes once the slot has it."""
        self.storage.write(self.key, encode_document(samples))
        self._samples = samples

    # --- reads ---

    def list(self) -> List[Dict[str, Any]]:
        return [dict(s) for s in self._samples]

    def get(self, sample_id: str) -> Dict[str, Any]:
        return dict(self._samples[self._index_of(sample_id)])

    def audit(self) -> List[AuditItem]:
        return audit_samples(self._samples)

    # --- writes ---

    def create(self, candidate: Mapping[str, Any]) -> Dict[str, Any]:
        fields = candidate
        if isinstance(candidate, Mapping):
            fields = {k: v for k, v in candidate.items() if k not in DERIVED_FIELDS}
        record = _checked(fields)
        record["sampleID"] = require_id(record)
        self._reject_collision(record["sampleID"])
        record["lastUpdated"] = self.clock()

        self._commit(self._samples + [record])
        logger.info("Registered sample %s", record["sampleID"])
        return dict(record)

    def update(self, sample_id: str, patch: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``patch`` onto the record; keys present in the patch win, even when None."""
        idx = self._index_of(sample_id)
        current = self._samples[idx]
        if not isinstance(patch, Mapping):
            raise ValidationError([FieldError(
                "patch", WRONG_TYPE, f"Expected a mapping, got {type(patch).__name__}.")])
        # legacy keys in a patch (name, date, location) are edits too, so they win here
        changes = upgrade_record({k: v for k, v in patch.items() if k not in DERIVED_FIELDS})
        changes.pop("sampleID", None)
        merged = dict(current)
        merged.update(changes)

        record = _checked(merged)
        derived = require_id(record)
        if id_inputs_changed(current, record):
            record["sampleID"] = derived
        else:
            record["sampleID"] = current["sampleID"] or derived
        self._reject_collision(record["sampleID"], ignore=idx)
        record["lastUpdated"] = self.clock()

        samples = list(self._samples)
        samples[idx] = record
        self._commit(samples)
        if record["sampleID"] != sample_id:
            logger.info("Updated sample %s (now %s)", sample_id, record["sampleID"])
        else:
            logger.info("Updated sample %s", sample_id)
        return dict(record)

    # --- helpers ---

    def _index_of(self, sample_id: str) -> int:
        for i, s in enumerate(self._samples):
            if s.get("sampleID") == sample_id:
                return i
        raise NotFoundError(sample_id)

    def _reject_collision(self, sample_id: str, ignore: Optional[int] = None) -> None:
        for i, s in enumerate(self._samples):
            if i != ignore and s.get("sampleID") == sample_id:
                raise DuplicateIDError(sample_id)

def _checked(candidate: Mapping[str, Any]) -> Dict[str, Any]:
    result = validate(candidate)
    if not result.ok:
        raise ValidationError(result.violations)
    return result.record

def _canonical(record: Dict[str, Any]) -> Dict[str, Any]:
    """Stored record in canonical key order; no defaults are invented on load."""
    return {f: record.get(f) for f in SAMPLE_FIELDS}
