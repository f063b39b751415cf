"""Lectura de direcciones desde un fichero (una por línea).

Se eliminan solo los terminadores de línea; las líneas vacías o con solo
espacios se ignoran. El resto se conserva literalmente (sin normalizar).
"""

from __future__ import annotations

from pathlib import Path

from core.domain.errors import InputError


def read_addresses(path: Path) -> list[str]:
    try:
        raw = path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        raise InputError(path, exc.strerror or str(exc)) from exc
    return [line for line in raw.splitlines() if line.strip()]
