"""
Recency views over the record store: read-only "latest N" orderings for the
dashboard cards, plus the list of samples that can be placed on the map.
"""
from __future__ import annotations
from typing import Any, Dict, List, Sequence

import pandas as pd

from merobase.core import config

Sample = Dict[str, Any]

def latest_registered(samples: Sequence[Sample], n: int) -> List[Sample]:
    """The last ``n`` samples in insertion order, newest first."""
    if n <= 0:
        return []
    return list(reversed(samples[-n:]))

def latest_edited(samples: Sequence[Sample], n: int) -> List[Sample]:
    """
    Samples ordered by ``lastUpdated``, newest first.

    Ties are broken by insertion position (later first); samples that were
    never stamped sort after every stamped one.
    """
    if n <= 0:
        return []
    # parsed, not compared as text: "10:00:00Z" and "10:00:00.5Z" do not sort as strings
    stamps = pd.to_datetime(
        pd.Series([s.get("lastUpdated") for s in samples], dtype=object),
        utc=True, errors="coerce", format="ISO8601",
    )
    keyed = [
        (pd.notna(ts), ts.value if pd.notna(ts) else 0, i, s)
        for i, (ts, s) in enumerate(zip(stamps, samples))
    ]
    keyed.sort(key=lambda t: t[:3], reverse=True)
    return [t[3] for t in keyed[:n]]

def latest_edited_positional(samples: Sequence[Sample], n: int) -> List[Sample]:
    """
    Legacy dashboard behaviour: the samples just before the newest one stand in
    for "latest edited". With one sample or none it mirrors latest_registered.
    """
    if len(samples) <= 1:
        return latest_registered(samples, n)
    return latest_registered(samples[:-1], n)

def located(samples: Sequence[Sample]) -> List[Sample]:
    return [
        s for s in samples
        if s.get("latitude") is not None and s.get("longitude") is not None
    ]

class RecencyViews:
    """Views bound to a RecordStore; each call reads the store's current list."""

    def __init__(self, store, window: int | None = None):
        self.store = store
        self.window = window if window is not None else config.DEFAULT_WINDOW

    def latest_registered(self, n: int | None = None) -> List[Sample]:
        return latest_registered(self.store.list(), self.window if n is None else n)

    def latest_edited(self, n: int | None = None) -> List[Sample]:
        return latest_edited(self.store.list(), self.window if n is None else n)

    def latest_edited_positional(self, n: int | None = None) -> List[Sample]:
        return latest_edited_positional(self.store.list(), self.window if n is None else n)

    def located(self) -> List[Sample]:
        return located(self.store.list())
