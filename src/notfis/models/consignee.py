from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Consignee:
    """Destinatário — the party receiving the cargo (registro 312)."""

    razao_social: str
    cnpj_cpf: str
    cidade: str
    estado: str
