from __future__ import annotations

from dataclasses import dataclass

_TRUE_VALUES = frozenset({"1", "true", "sim", "s", "yes", "y", "on"})


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Reader settings loaded from notfis.yaml and environment overrides."""

    encoding: str = "iso-8859-1"
    strict_numeric: bool = False  # True = skip 313 records with malformed numbers
    history_limit: int = 20
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, d: dict) -> Settings:
        """Create Settings from a YAML-loaded dict, applying defaults for missing keys."""
        return cls(
            encoding=str(d.get("encoding") or "iso-8859-1"),
            strict_numeric=_as_bool(d.get("strict_numeric", False)),
            history_limit=int(d.get("history_limit", 20)),
            log_level=str(d.get("log_level", "WARNING")).upper(),
        )
