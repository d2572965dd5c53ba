# merobase/validation/audit.py
from __future__ import annotations
from typing import Any, Dict, List, Sequence

import pandas as pd
from pandera.errors import SchemaErrors

from merobase.core.sample import SAMPLE_FIELDS
from merobase.schemas.sample_table import schema
from .types import AuditItem

def samples_frame(samples: Sequence[Dict[str, Any]]) -> pd.DataFrame:
    return pd.DataFrame(list(samples), columns=list(SAMPLE_FIELDS), dtype=object)

def audit_samples(samples: Sequence[Dict[str, Any]]) -> List[AuditItem]:
    """Collection-level checks (unique IDs, enums, ranges) over a whole document."""
    if not samples:
        return []
    try:
        schema.validate(samples_frame(samples), lazy=True)
    except SchemaErrors as err:
        items = [
            AuditItem(
                column=str(row["column"]),
                check=str(row["check"]),
                failure=str(row["failure_case"]),
                index=int(row["index"]) if pd.notna(row["index"]) else -1,
            )
            for _, row in err.failure_cases.iterrows()
        ]
        items.sort(key=lambda w: (w.index, w.column, w.check))
        return items
    return []
