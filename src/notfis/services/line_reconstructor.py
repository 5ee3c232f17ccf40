from __future__ import annotations

import logging

from notfis.services.layout import RECORD_IDS

logger = logging.getLogger(__name__)


def reconstruct_lines(raw: str) -> list[str]:
    """Rebuild logical records from text whose lines may have been broken in transit.

    A physical line starting with a known record identifier opens a new
    record. Any other non-blank line is glued, as-is, onto the record
    currently open. Blank lines and fragments seen before the first
    record are dropped.
    """
    fixed: list[str] = []
    current: str | None = None

    for number, line in enumerate(raw.replace("\r", "").split("\n"), start=1):
        if line[:3] in RECORD_IDS:
            if current:
                fixed.append(current)
            current = line
        elif line.strip():
            if current is None:
                logger.debug("Linha %d descartada: continuação sem registro aberto", number)
                continue
            current += line

    if current:
        fixed.append(current)

    return fixed
