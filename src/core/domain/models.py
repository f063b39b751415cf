"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Serialización estable (`model_dump(mode="json")`) para los exportadores.

Nota:
- Estos modelos describen *qué* es un resultado, no *cómo* se obtiene.
- Todos son inmutables (`frozen`): un resultado se produce una sola vez.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class Outcome(str, Enum):
    """Clasificación de una dirección según la respuesta del proveedor."""

    VALID = "valid"
    INVALID = "invalid"
    UNKNOWN = "unknown"

    def label(self) -> str:
        return self.name


class CheckResult(BaseModel):
    """Resultado de una unidad de sondeo: o bien un `Outcome`, o bien un error.

    Por qué un único modelo:
    - El dispatcher devuelve exactamente un `CheckResult` por dirección,
      haya fallado la red o no.
    - Los fallos de transporte se cuentan aparte, nunca como `UNKNOWN`.
    """

    model_config = ConfigDict(frozen=True)

    address: str = Field(
        ...,
        description="Dirección consultada, tal cual se recibió (sin normalizar).",
    )
    outcome: Outcome | None = Field(
        default=None,
        description="Clasificación de la respuesta (ausente si la sonda falló).",
    )
    error: str | None = Field(
        default=None,
        description="Motivo del fallo de transporte (ausente si hubo respuesta).",
    )

    @model_validator(mode="after")
    def check_outcome_or_error(self) -> "CheckResult":
        if (self.outcome is None) == (self.error is None):
            raise ValueError("CheckResult requires exactly one of outcome/error")
        return self

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, address: str, outcome: Outcome) -> "CheckResult":
        return cls(address=address, outcome=outcome)

    @classmethod
    def failure(cls, address: str, error: str) -> "CheckResult":
        return cls(address=address, error=error)


class Aggregate(BaseModel):
    """Agregado final de una ejecución.

    `valid_addresses` conserva el orden de finalización de las sondas,
    no el orden de entrada.
    """

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, ge=0, description="Direcciones procesadas (incluye fallos).")
    valid: int = Field(default=0, ge=0)
    invalid: int = Field(default=0, ge=0)
    unknown: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0, description="Sondas con error de transporte.")
    valid_addresses: list[str] = Field(default_factory=list)

    @property
    def processed(self) -> int:
        return self.total


class PipelineResult(BaseModel):
    """Salida completa de una ejecución del pipeline."""

    results: list[CheckResult] = Field(
        default_factory=list,
        description="Resultados por dirección en orden de finalización.",
    )
    aggregate: Aggregate = Field(default_factory=Aggregate)
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
