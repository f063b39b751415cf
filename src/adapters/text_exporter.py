"""Exportación de direcciones válidas a texto plano.

Formato: una dirección por línea, terminada en `\n`.
Por defecto el fichero se crea de nuevo en cada ejecución; `append=True`
abre el fichero en modo "añadir" (compatibilidad con ejecuciones previas).
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.errors import SinkError
from core.domain.models import Aggregate

logger = logging.getLogger(__name__)


def export_valid_text(*, aggregate: Aggregate, output_path: Path, append: bool = False) -> Path:
    mode = "a" if append else "w"
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open(mode, encoding="utf-8", errors="surrogateescape", newline="\n") as fh:
            for address in aggregate.valid_addresses:
                fh.write(f"{address}\n")
    except OSError as exc:
        raise SinkError(output_path, exc.strerror or str(exc)) from exc
    logger.info("wrote %d address(es) to %s", len(aggregate.valid_addresses), output_path)
    return output_path
