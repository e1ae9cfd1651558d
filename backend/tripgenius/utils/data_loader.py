# backend/tripgenius/utils/data_loader.py

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@lru_cache(maxsize=None)
def load_data(name: str) -> Any:
    """Load one of the bundled JSON lookup tables (activities, visa_rules, ...)."""
    with open(DATA_DIR / f"{name}.json", encoding="utf-8") as f:
        return json.load(f)
