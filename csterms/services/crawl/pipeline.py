from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Mapping, Optional

from csterms.config import Settings, get_settings
from .errors import SnapshotError


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def snapshot_path(settings: Settings, now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now()).strftime(settings.timestamp_format)
    return os.path.join(settings.out_dir, f"{settings.snapshot_prefix}_{stamp}.json")


def write_snapshot(terms: Mapping[str, str], settings: Optional[Settings] = None, now: Optional[datetime] = None) -> str:
    """Write the glossary as pretty-printed JSON to a timestamped file.

    Creates the output directory if needed and returns the written path.
    Serialization and filesystem errors are raised as SnapshotError.
    """
    settings = settings or get_settings()
    try:
        payload = json.dumps(dict(terms), ensure_ascii=False, sort_keys=True, indent=4)
    except (TypeError, ValueError) as exc:
        raise SnapshotError(f"Failed to convert to JSON: {exc}") from exc

    path = snapshot_path(settings, now)
    try:
        ensure_dir(settings.out_dir)
        with open(path, "w", encoding="utf-8") as f:
            f.write(payload)
    except OSError as exc:
        raise SnapshotError(f"Failed to write file: {exc}") from exc
    return path
