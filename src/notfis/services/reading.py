from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from notfis.models.invoice import Invoice
from notfis.models.settings import Settings
from notfis.services.exceptions import NotfisReadError
from notfis.services.record_parser import parse_notfis

logger = logging.getLogger(__name__)

EMPTY_RESULT_MESSAGE = (
    "Nenhuma nota fiscal encontrada. Verifique se o arquivo segue o padrão NOTFIS 3.0A."
)
READ_ERROR_MESSAGE = "Erro de leitura do arquivo."


@dataclass(frozen=True)
class Totals:
    total_notas: int = 0
    total_cubagem: Decimal = Decimal(0)
    total_valor: Decimal = Decimal(0)
    total_peso: Decimal = Decimal(0)
    total_volumes: Decimal = Decimal(0)


@dataclass
class NotfisResult:
    """Everything read from one NOTFIS file."""

    file_name: str
    path: str
    invoices: list[Invoice] = field(default_factory=list)
    totals: Totals = field(default_factory=Totals)

    @property
    def is_empty(self) -> bool:
        return not self.invoices


def summarize(invoices: list[Invoice]) -> Totals:
    """Add up the per-invoice quantities shown in the file totals."""
    return Totals(
        total_notas=len(invoices),
        total_cubagem=sum((n.cubagem for n in invoices), Decimal(0)),
        total_valor=sum((n.valor_total for n in invoices), Decimal(0)),
        total_peso=sum((n.peso_total for n in invoices), Decimal(0)),
        total_volumes=sum((n.qtde_volumes for n in invoices), Decimal(0)),
    )


def decode_notfis(data: bytes, encoding: str = "iso-8859-1") -> str:
    """Decode raw file bytes with a legacy single-byte encoding.

    Raises NotfisReadError for an unknown encoding or bytes it cannot decode.
    """
    try:
        return data.decode(encoding)
    except LookupError:
        raise NotfisReadError(f"Codificação desconhecida: '{encoding}'") from None
    except UnicodeDecodeError as e:
        raise NotfisReadError(f"Falha ao decodificar o arquivo ({encoding}): {e}") from None


def parse_text(
    content: str, file_name: str = "", path: str = "", *, strict_numeric: bool = False
) -> NotfisResult:
    invoices = parse_notfis(content, strict_numeric=strict_numeric)
    return NotfisResult(
        file_name=file_name,
        path=path,
        invoices=invoices,
        totals=summarize(invoices),
    )


def read_notfis(path: str | Path, settings: Settings | None = None) -> NotfisResult:
    """Read, decode and parse one NOTFIS file.

    Raises NotfisReadError when the file cannot be read or decoded. A file
    with no usable invoices is not an error: check ``result.is_empty``.
    """
    settings = settings or Settings()
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        logger.warning("Falha ao ler %s: %s", p, e)
        raise NotfisReadError(f"{READ_ERROR_MESSAGE} {e.strerror or e}", path=str(p)) from e

    try:
        content = decode_notfis(data, settings.encoding)
    except NotfisReadError as e:
        logger.warning("Falha ao decodificar %s: %s", p, e)
        e.path = str(p)
        raise

    result = parse_text(
        content,
        file_name=p.name,
        path=str(p.resolve()),
        strict_numeric=settings.strict_numeric,
    )
    if result.is_empty:
        logger.info("%s: nenhuma nota fiscal encontrada", p.name)
    else:
        logger.info("%s: %d nota(s) fiscal(is)", p.name, result.totals.total_notas)
    return result
