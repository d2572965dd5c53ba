"""
Query engine: filter a list of samples by a conjunction of optional predicates.

Each predicate becomes a boolean mask over a DataFrame view of the samples,
the same way column checks build their masks. An absent predicate is an
all-True mask, so ``filter_samples(samples, {})`` returns every sample in order.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import pandas as pd

from merobase.validation.audit import samples_frame

TEXT_COLUMNS = ("sampleName", "sampleID", "species", "genus", "family")

# Filter values that mean "do not filter on this field".
BYPASS = (None, "", "All")

# collaborator key -> SampleQuery attribute
QUERY_KEYS = {
    "text": "text",
    "query": "text",
    "kingdom": "kingdom",
    "projectType": "project_type",
    "dateFrom": "date_from",
    "dateTo": "date_to",
}

DateLike = Union[str, date, datetime, None]

def _as_date(value: DateLike, name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            pass
    raise ValueError(f"{name} must be a date (YYYY-MM-DD), got {value!r}")

@dataclass
class SampleQuery:
    text: Optional[str] = None
    kingdom: Optional[str] = None
    project_type: Optional[str] = None
    date_from: DateLike = None
    date_to: DateLike = None

    def __post_init__(self):
        self.date_from = _as_date(self.date_from, "dateFrom")
        self.date_to = _as_date(self.date_to, "dateTo")

    @classmethod
    def from_mapping(cls, predicates: Mapping[str, Any]) -> "SampleQuery":
        unknown = set(predicates) - set(QUERY_KEYS)
        if unknown:
            raise ValueError(f"Unknown filter keys: {', '.join(sorted(unknown))}")
        kwargs: Dict[str, Any] = {}
        for key, value in predicates.items():
            kwargs[QUERY_KEYS[key]] = value
        return cls(**kwargs)


def text_mask(df: pd.DataFrame, text: Optional[str]) -> pd.Series:
    if not text:
        return pd.Series(True, index=df.index)
    haystack = df[list(TEXT_COLUMNS)].fillna("").astype(str).apply(" ".join, axis=1)
    return haystack.str.lower().str.contains(text.lower(), regex=False)

def equals_mask(df: pd.DataFrame, column: str, value: Optional[str]) -> pd.Series:
    if value in BYPASS:
        return pd.Series(True, index=df.index)
    return df[column].eq(value).fillna(False).astype(bool)

def date_mask(df: pd.DataFrame, date_from: Optional[date], date_to: Optional[date]) -> pd.Series:
    mask = pd.Series(True, index=df.index)
    if date_from is None and date_to is None:
        return mask
    # anything that is not YYYY-MM-DD becomes NaT and fails every comparison
    dates = pd.to_datetime(df["collectionDate"], format="%Y-%m-%d", errors="coerce")
    if date_from is not None:
        mask &= dates >= pd.Timestamp(date_from)
    if date_to is not None:
        mask &= dates <= pd.Timestamp(date_to)
    return mask

def filter_samples(
    samples: Sequence[Dict[str, Any]],
    predicates: Union[SampleQuery, Mapping[str, Any], None] = None,
) -> List[Dict[str, Any]]:
    if predicates is None:
        query = SampleQuery()
    elif isinstance(predicates, SampleQuery):
        query = predicates
    else:
        query = SampleQuery.from_mapping(predicates)

    if not samples:
        return []
    df = samples_frame(samples)
    mask = (
        text_mask(df, query.text)
        & equals_mask(df, "kingdom", query.kingdom)
        & equals_mask(df, "projectType", query.project_type)
        & date_mask(df, query.date_from, query.date_to)
    )
    return [dict(samples[i]) for i in df.index[mask.to_numpy()]]
