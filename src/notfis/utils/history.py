"""Local history of NOTFIS files opened in the reader.

Stored as a small JSON list in the data dir so recent files can be
reopened from the TUI. Most recent entry first, one entry per path.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from filelock import FileLock

from notfis import config as _config
from notfis.services.reading import NotfisResult

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20


def _history_path() -> Path:
    return _config.get_data_dir() / "history.json"


def _backup_corrupt(path: Path) -> Path:
    """Rename a corrupt file to a timestamped backup before it gets overwritten."""
    ts = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    backup = path.with_name(f"{path.name}.corrupt.{ts}")
    path.rename(backup)
    logger.warning("Corrupt file backed up: %s → %s", path, backup)
    return backup


@contextmanager
def _locked() -> Iterator[None]:
    """Hold an exclusive file lock during history read-modify-write."""
    hp = _history_path()
    hp.parent.mkdir(parents=True, exist_ok=True)
    lock = FileLock(hp.with_suffix(".lock"))
    with lock:
        yield


def _load() -> list[dict[str, Any]]:
    hp = _history_path()
    if not hp.exists():
        return []
    try:
        data = json.loads(hp.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError):
        _backup_corrupt(hp)
        return []
    if not isinstance(data, list) or not all(isinstance(e, dict) for e in data):
        _backup_corrupt(hp)
        return []
    return data


def _save(entries: list[dict[str, Any]]) -> None:
    hp = _history_path()
    hp.parent.mkdir(parents=True, exist_ok=True)
    tmp = hp.with_suffix(".tmp")
    tmp.write_text(json.dumps(entries, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    os.replace(tmp, hp)


def add_entry(result: NotfisResult, limit: int = DEFAULT_LIMIT) -> dict[str, Any]:
    """Record a file that was just read, moving it to the top of the history."""
    entry = {
        "path": result.path,
        "file_name": result.file_name,
        "notas": result.totals.total_notas,
        "total_valor": str(result.totals.total_valor),
        "total_cubagem": str(result.totals.total_cubagem),
        "read_at": datetime.now(UTC).isoformat(timespec="seconds"),
    }
    with _locked():
        entries = [e for e in _load() if e.get("path") != result.path]
        entries.insert(0, entry)
        _save(entries[: max(limit, 1)])
    return entry


def list_entries() -> list[dict[str, Any]]:
    """Return history entries, most recent first."""
    with _locked():
        return _load()


def clear_history() -> None:
    with _locked():
        _save([])
