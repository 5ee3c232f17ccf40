from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def format_number(value: Decimal | str | int, places: int = 2) -> str:
    """Format a number pt-BR style: 1.234,567. Halves round away from zero."""
    d = Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    formatted = f"{d:,.{places}f}"
    return formatted.replace(",", "X").replace(".", ",").replace("X", ".")


def format_brl(value: Decimal | str | int) -> str:
    """Format a numeric value as R$ X.XXX,XX."""
    return f"R$ {format_number(value, 2)}"


def format_date_br(value: str) -> str:
    """Format a DDMMAAAA date as DD/MM/AAAA. Anything else is returned unchanged."""
    if not value or len(value) != 8:
        return value
    return f"{value[0:2]}/{value[2:4]}/{value[4:8]}"


def format_cnpj_cpf(value: str) -> str:
    """Punctuate a raw CNPJ (14 digits) or CPF (11 digits). Anything else is unchanged."""
    if not value.isdigit():
        return value
    if len(value) == 14:
        return f"{value[0:2]}.{value[2:5]}.{value[5:8]}/{value[8:12]}-{value[12:14]}"
    if len(value) == 11:
        return f"{value[0:3]}.{value[3:6]}.{value[6:9]}-{value[9:11]}"
    return value
