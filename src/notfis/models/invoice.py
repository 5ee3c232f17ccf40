from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from notfis.models.consignee import Consignee
from notfis.models.shipper import Shipper


@dataclass(frozen=True)
class Invoice:
    numero_nf: str
    serie: str
    data_emissao: str  # DDMMAAAA, as found in the file
    shipper: Shipper
    consignee: Consignee
    qtde_volumes: Decimal
    valor_total: Decimal
    peso_total: Decimal  # kg
    cubagem: Decimal  # m³
    chave_acesso: str = ""
