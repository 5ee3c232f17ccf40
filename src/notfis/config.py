from __future__ import annotations

import logging
import os
from pathlib import Path

import platformdirs
import yaml
from dotenv import load_dotenv

from notfis.models.settings import Settings

APP_NAME = "leitor-notfis"
SETTINGS_FILE = "notfis.yaml"
LOG_FILE = "leitor-notfis.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_config_dir_for_dotenv() -> Path | None:
    """Resolve config dir for .env loading without depending on env vars from .env itself.

    Returns None if only platformdirs would resolve and that dir does not exist yet.
    """
    from_env = os.environ.get("NOTFIS_CONFIG_DIR")
    if from_env:
        return Path(from_env)
    project_root = Path(__file__).resolve().parent.parent.parent
    candidate = project_root / "config"
    if candidate.is_dir():
        return candidate
    pd = Path(platformdirs.user_config_dir(APP_NAME))
    if pd.is_dir():
        return pd
    return None


# Load .env: cwd first (highest priority), then config dir (won't override)
load_dotenv()
_cfg_dir = _resolve_config_dir_for_dotenv()
if _cfg_dir is not None:
    load_dotenv(_cfg_dir / ".env")


def _resolve_dir(env_var: str, default_subdir: str, kind: str) -> Path:
    """Resolve a directory from env var, repo layout, or platform default.

    Priority: 1) env var, 2) dev repo layout, 3) platformdirs user directory.
    """
    from_env = os.environ.get(env_var)
    if from_env:
        return Path(from_env)
    # Development layout: src/notfis/config.py -> ../../.. = project root
    project_root = Path(__file__).resolve().parent.parent.parent
    candidate = project_root / default_subdir
    if candidate.is_dir():
        return candidate
    if kind == "config":
        return Path(platformdirs.user_config_dir(APP_NAME))
    return Path(platformdirs.user_data_dir(APP_NAME))


def get_config_dir() -> Path:
    """Resolve config directory. Re-evaluated on each call to pick up env changes."""
    return _resolve_dir("NOTFIS_CONFIG_DIR", "config", kind="config")


def get_data_dir() -> Path:
    """Resolve data directory. Re-evaluated on each call to pick up env changes."""
    return _resolve_dir("NOTFIS_DATA_DIR", "data", kind="data")


# --- YAML config ---


def load_yaml(path: Path) -> dict:
    """Load and parse a YAML file, returning the top-level dict (empty file -> {})."""
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def load_settings() -> Settings:
    """Load reader settings from notfis.yaml, then apply NOTFIS_* env overrides.

    A missing notfis.yaml yields the defaults.
    """
    path = get_config_dir() / SETTINGS_FILE
    data = load_yaml(path) if path.is_file() else {}

    overrides = {
        "encoding": os.environ.get("NOTFIS_ENCODING"),
        "strict_numeric": os.environ.get("NOTFIS_STRICT_NUMERIC"),
        "log_level": os.environ.get("NOTFIS_LOG_LEVEL"),
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings.from_dict(data)


# --- Logging ---


def setup_logging(settings: Settings) -> Path:
    """Send package logs to a file in the data dir (the TUI owns the terminal).

    Returns the log file path. Calling it again replaces the previous handler.
    """
    log_path = get_data_dir() / LOG_FILE
    log_path.parent.mkdir(parents=True, exist_ok=True)

    pkg_logger = logging.getLogger("notfis")
    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_notfis_file", False):
            pkg_logger.removeHandler(handler)
            handler.close()

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._notfis_file = True  # type: ignore[attr-defined]
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.getLevelNamesMapping().get(settings.log_level, logging.WARNING))
    return log_path
