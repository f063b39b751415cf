"""Clasificador de respuestas de GetCredentialType.

El endpoint devuelve un JSON con `IfExistsResult`:
- 0 => la cuenta existe
- 1 => la cuenta no existe

Solo se interpretan esos dos marcadores como subcadenas literales; cualquier
otro cuerpo (vacío, HTML, basura) es `UNKNOWN`. Si el proveedor cambia el
formato, basta con actualizar las constantes.
"""

from __future__ import annotations

from core.domain.models import Outcome

ABSENT_MARKER = '"IfExistsResult":1'
EXISTS_MARKER = '"IfExistsResult":0'


def classify(body: str | bytes | None) -> Outcome:
    """Clasifica el cuerpo de una respuesta. Nunca lanza excepciones."""

    if not body:
        return Outcome.UNKNOWN
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")

    # El marcador de "no existe" se comprueba primero y tiene prioridad.
    if ABSENT_MARKER in body:
        return Outcome.INVALID
    if EXISTS_MARKER in body:
        return Outcome.VALID
    return Outcome.UNKNOWN
