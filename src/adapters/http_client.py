"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y límites del pool en un único sitio.
- Facilita testeo: se puede inyectar un `transport` (p.ej. `httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea el `httpx.AsyncClient` compartido por todas las sondas.

    Por qué un builder:
    - El cliente es de solo lectura tras crearse y seguro para uso concurrente.
    - Sin timeout salvo que se configure `http_timeout_seconds`.
    - Pool sin tope de conexiones: cada sonda es una tarea independiente.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json, text/plain, */*",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        limits=httpx.Limits(max_connections=None, max_keepalive_connections=20),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
