"""
Atomic I/O utilities for demo reports.

Writes go to a temp file first and are moved into place with os.replace,
so a crash never leaves a half-written report behind.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Any


def atomic_write_json(path: str | Path, obj: Dict[str, Any]) -> None:
    """
    Write JSON file atomically using temp file + os.replace.

    Ensures parent directory exists.

    Args:
        path: Target file path
        obj: Dict to serialize as JSON
    """
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)

    temp_path = path_obj.with_suffix(path_obj.suffix + ".tmp")

    try:
        # ensure_ascii=False keeps currency symbols readable
        with temp_path.open("w", encoding="utf-8") as f:
            json.dump(obj, f, indent=2, ensure_ascii=False, default=str)

        os.replace(str(temp_path), str(path_obj))
    except Exception:
        if temp_path.exists():
            temp_path.unlink()
        raise
