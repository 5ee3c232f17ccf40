"""Extraction of invoices (registro 313) from a NOTFIS 3.0A file.

Each 313 record is paired with the embarcadora (311) and destinatário
(312) seen most recently before it. The embarcadora stays active until
another 311 replaces it; the destinatário is consumed by the first 313
that uses it.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal

from notfis.models.consignee import Consignee
from notfis.models.invoice import Invoice
from notfis.models.shipper import Shipper
from notfis.services.exceptions import NotfisFormatError
from notfis.services.layout import (
    MIN_LEN_313,
    MIN_LEN_CHAVE,
    REG_311,
    REG_312,
    REG_313,
    REG_DESTINATARIO,
    REG_EMBARCADORA,
    REG_NOTA_FISCAL,
    SCALED_313,
)
from notfis.services.line_reconstructor import reconstruct_lines

logger = logging.getLogger(__name__)


def field(line: str, span: tuple[int, int]) -> str:
    """Return the trimmed text between the given columns (empty past end of line)."""
    start, end = span
    return line[start:end].strip()


def parse_scaled(raw: str, *, strict: bool = False) -> Decimal:
    """Parse a zero-padded number with two implied decimal places.

    Blank input is zero. Anything other than ASCII digits is also zero,
    unless ``strict`` is set, in which case NotfisFormatError is raised.
    """
    raw = (raw or "").strip()
    if not raw:
        return Decimal(0)
    if not (raw.isascii() and raw.isdigit()):
        if strict:
            raise NotfisFormatError(f"Valor numerico invalido: '{raw}'", raw=raw)
        logger.debug("Valor numerico invalido tratado como zero: %r", raw)
        return Decimal(0)
    return Decimal(int(raw)) / 100


def parse_shipper(line: str) -> Shipper:
    return Shipper(
        cnpj=field(line, REG_311["cnpj"]),
        razao_social=field(line, REG_311["razao_social"]),
    )


def parse_consignee(line: str) -> Consignee:
    return Consignee(
        razao_social=field(line, REG_312["razao_social"]),
        cnpj_cpf=field(line, REG_312["cnpj_cpf"]),
        cidade=field(line, REG_312["cidade"]),
        estado=field(line, REG_312["estado"]),
    )


def parse_invoice_fields(line: str, *, strict: bool = False) -> dict | None:
    """Slice the invoice fields of a 313 record.

    Returns None when the record is too short to hold the invoice data.
    """
    if len(line) < MIN_LEN_313:
        return None

    values: dict = {
        "serie": field(line, REG_313["serie"]),
        "numero_nf": field(line, REG_313["numero_nf"]),
        "data_emissao": field(line, REG_313["data_emissao"]),
    }
    for name in SCALED_313:
        values[name] = parse_scaled(line[slice(*REG_313[name])], strict=strict)

    values["chave_acesso"] = (
        field(line, REG_313["chave_acesso"]) if len(line) >= MIN_LEN_CHAVE else ""
    )
    return values


def parse_notfis(content: str, *, strict_numeric: bool = False) -> list[Invoice]:
    """Parse decoded NOTFIS text into invoices, in file order.

    Records that are too short, out of context or (in strict mode) carry
    malformed numbers are skipped; parsing always runs to the end of the file.
    """
    invoices: list[Invoice] = []
    shipper: Shipper | None = None
    consignee: Consignee | None = None

    for line in reconstruct_lines(content):
        if len(line) < 3:
            continue

        registro = line[:3]
        if registro == REG_EMBARCADORA:
            shipper = parse_shipper(line)
        elif registro == REG_DESTINATARIO:
            consignee = parse_consignee(line)
        elif registro == REG_NOTA_FISCAL:
            try:
                values = parse_invoice_fields(line, strict=strict_numeric)
            except NotfisFormatError as e:
                logger.warning("Registro 313 ignorado: %s", e)
                continue
            if values is None:
                logger.debug("Registro 313 ignorado: linha com %d caracteres", len(line))
                continue
            if shipper is None or consignee is None:
                logger.debug(
                    "Registro 313 ignorado: NF %s sem embarcadora/destinatario",
                    values["numero_nf"],
                )
                continue
            invoices.append(
                Invoice(shipper=replace(shipper), consignee=replace(consignee), **values)
            )
            consignee = None

    logger.info("%d nota(s) fiscal(is) extraida(s)", len(invoices))
    return invoices
