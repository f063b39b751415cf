"""Exportación JSON de una ejecución completa.

Por qué JSON:
- Interoperabilidad con otras herramientas de recon y pipelines.
- Incluye los resultados por dirección (también fallos), no solo los válidos.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.errors import SinkError
from core.domain.models import PipelineResult


def export_run_json(*, result: PipelineResult, output_path: Path) -> Path:
    """Exporta `PipelineResult` a JSON UTF-8 con formato estable."""

    payload = result.model_dump(mode="json")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
            errors="surrogateescape",
        )
    except OSError as exc:
        raise SinkError(output_path, exc.strerror or str(exc)) from exc
    return output_path
