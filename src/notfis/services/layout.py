"""NOTFIS 3.0A record layout.

Record identifiers and the column ranges read from each record.
Ranges are 0-based and half-open, ready to be used as slice bounds.
"""

from __future__ import annotations

RECORD_IDS: frozenset[str] = frozenset({
    "000", "310", "311", "312", "313", "314",
    "316", "317", "318", "319", "333",
})

REG_EMBARCADORA = "311"
REG_DESTINATARIO = "312"
REG_NOTA_FISCAL = "313"

REG_311: dict[str, tuple[int, int]] = {
    "cnpj": (3, 17),
    "razao_social": (133, 173),
}

REG_312: dict[str, tuple[int, int]] = {
    "razao_social": (3, 43),
    "cnpj_cpf": (43, 57),
    "cidade": (132, 167),
    "estado": (185, 194),
}

# Numeric fields with two implied decimal places are marked in SCALED_313.
REG_313: dict[str, tuple[int, int]] = {
    "serie": (29, 32),
    "numero_nf": (32, 40),
    "data_emissao": (40, 48),
    "qtde_volumes": (78, 85),
    "valor_total": (85, 100),
    "peso_total": (100, 107),
    "cubagem": (107, 112),
    "chave_acesso": (254, 298),
}

SCALED_313: tuple[str, ...] = ("qtde_volumes", "valor_total", "peso_total", "cubagem")

MIN_LEN_313 = 120
MIN_LEN_CHAVE = 298
