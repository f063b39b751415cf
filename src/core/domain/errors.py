"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI captura `AzCheckError` en un único punto y decide el exit code.
- Los adaptadores traducen excepciones de infraestructura (httpx, OSError)
  a estos tipos, de modo que el Core no depende de ellas.
"""

from __future__ import annotations

from pathlib import Path


class AzCheckError(Exception):
    """Base de todos los errores controlados de la aplicación."""


class ProbeError(AzCheckError):
    """Fallo de transporte al sondear una dirección (red, timeout, HTTP no-2xx)."""

    def __init__(self, address: str, reason: str) -> None:
        super().__init__(f"{address}: {reason}")
        self.address = address
        self.reason = reason


class SinkError(AzCheckError):
    """Fallo al escribir un fichero de salida. Es fatal para la ejecución."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot write '{path}': {reason}")
        self.path = path
        self.reason = reason


class InputError(AzCheckError):
    """El fichero de direcciones no se puede leer."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read '{path}': {reason}")
        self.path = path
        self.reason = reason
