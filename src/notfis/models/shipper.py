from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Shipper:
    """Embarcadora — the party sending the cargo (registro 311)."""

    cnpj: str
    razao_social: str
