"""Sonda: Microsoft / Azure AD `GetCredentialType`.

Implementación:
- Un único POST por dirección al endpoint configurado.
- El cuerpo se construye literalmente como `{"Username":"<address>"}`, sin
  escapar comillas ni caracteres de control.
- La respuesta se pasa tal cual al clasificador.

Notas:
- Nunca se envía una contraseña ni un intento de login.
- Errores de red y estados no-2xx => `ProbeError`.
"""

from __future__ import annotations

import logging

import httpx

from core.classifier import classify
from core.config import AppSettings
from core.domain.errors import ProbeError
from core.domain.models import Outcome
from core.interfaces.prober import AccountProber

logger = logging.getLogger(__name__)


def build_request_body(address: str) -> bytes:
    # surrogateescape: bytes no-UTF-8 recibidos por argv salen tal cual.
    return ('{"Username":"' + address + '"}').encode("utf-8", errors="surrogateescape")


class CredentialTypeProber(AccountProber):
    def __init__(self, client: httpx.AsyncClient, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    async def probe(self, address: str) -> Outcome:
        try:
            response = await self._client.post(
                self._settings.endpoint_url,
                content=build_request_body(address),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise ProbeError(address, f"{exc.__class__.__name__}: {exc}") from exc

        if not response.is_success:
            raise ProbeError(address, f"HTTP {response.status_code}")

        outcome = classify(response.content)
        logger.debug("probe %r -> %s (HTTP %s)", address, outcome.label(), response.status_code)
        return outcome
