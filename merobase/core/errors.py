"""Errors raised by the sample record engine."""
from __future__ import annotations
from typing import List, Sequence

from merobase.validation.types import FieldError


class MeroBaseError(Exception):
    """Base class for every error the engine signals."""


class ValidationError(MeroBaseError):
    """A candidate record broke one or more schema rules."""

    def __init__(self, violations: Sequence[FieldError]):
        self.violations = list(violations)
        summary = "; ".join(f"{v.field}: {v.reason}" for v in self.violations)
        super().__init__(f"Sample failed validation ({summary})")


class IdentifierError(MeroBaseError):
    """The fields needed to derive a sampleID are incomplete."""

    def __init__(self, missing: Sequence[str], message: str | None = None):
        self.missing: List[str] = list(missing)
        super().__init__(message or f"Cannot derive sampleID, missing: {', '.join(self.missing)}")


class DuplicateIDError(IdentifierError):
    """The derived sampleID already belongs to another record."""

    def __init__(self, sample_id: str):
        self.sample_id = sample_id
        super().__init__([], f"sampleID '{sample_id}' is already registered")


class NotFoundError(MeroBaseError):
    def __init__(self, sample_id: str):
        self.sample_id = sample_id
        super().__init__(f"No sample with sampleID '{sample_id}'")


class PersistenceCorruptError(MeroBaseError):
    """The stored document could not be decoded. Recovered as an empty collection."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Stored document '{key}' is corrupt: {reason}")
