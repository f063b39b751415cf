"""Exportación CSV indexada de direcciones válidas.

Columnas: índice (base 0, posición en `valid_addresses`) y dirección.
La cabecera es opcional pero fija (`index,address`).
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from core.domain.errors import SinkError
from core.domain.models import Aggregate

logger = logging.getLogger(__name__)

CSV_HEADER = ("index", "address")


def export_valid_csv(*, aggregate: Aggregate, output_path: Path, header: bool = False) -> Path:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            writer = csv.writer(fh, lineterminator="\n")
            if header:
                writer.writerow(CSV_HEADER)
            for index, address in enumerate(aggregate.valid_addresses):
                writer.writerow((index, address))
    except OSError as exc:
        raise SinkError(output_path, exc.strerror or str(exc)) from exc
    logger.info("wrote %d csv row(s) to %s", len(aggregate.valid_addresses), output_path)
    return output_path
