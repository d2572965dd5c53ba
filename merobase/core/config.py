from __future__ import annotations
import os
from pathlib import Path

# Where JsonFileStorage keeps its slot files.
DATA_DIR = Path(os.getenv("MEROBASE_DATA_DIR", ".merobase_data"))

# Name of the single slot holding the serialized sample collection.
SLOT_KEY = os.getenv("MEROBASE_SLOT_KEY", "mero_samples")

# Window size for the dashboard recency cards.
DEFAULT_WINDOW = int(os.getenv("MEROBASE_RECENT_WINDOW", "5"))
