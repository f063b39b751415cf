"""Contrato de las sondas de cuentas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El pipeline se puede testear con sondas falsas sin tocar la red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Outcome


@runtime_checkable
class AccountProber(Protocol):
    """Contrato mínimo para una sonda.

    Reglas de diseño:
    - `probe` es asíncrono porque hace exactamente una llamada de red.
    - Los fallos de transporte se lanzan como `ProbeError`, nunca se
      convierten en `Outcome.UNKNOWN`.
    """

    async def probe(self, address: str) -> Outcome:
        """Sondea una dirección y devuelve su clasificación."""

        ...
