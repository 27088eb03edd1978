"""
Modelos del plan (agnósticos de interfaz).

- Esquema de entrada: lo que produce `terraform show -json` (validado con Pydantic).
- Modelo de salida: lo que consumen los renderers (dataclasses inmutables).
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field


# --- Esquema de entrada ---

class Change(BaseModel):
    """Bloque `change` de un resource_change."""
    actions: List[str] = Field(..., description="Secuencia de acciones (ej: ['delete', 'create'])")
    before: Optional[Any] = Field(None, description="Snapshot de atributos antes del cambio")
    after: Optional[Any] = Field(None, description="Snapshot de atributos después del cambio")


class ResourceChange(BaseModel):
    """Cambio propuesto para un recurso, identificado por address."""
    address: str = Field(..., description="Dirección del recurso (ej: aws_instance.web)")
    type: str = Field(..., description="Tipo del recurso (ej: aws_instance)")
    change: Change


class TerraformPlan(BaseModel):
    """Plan completo; el orden de resource_changes es el orden de presentación."""
    resource_changes: List[ResourceChange] = Field(..., description="Cambios de recursos")
    format_version: Optional[str] = None
    terraform_version: Optional[str] = None


# --- Modelo de salida ---

class ActionKind(str, Enum):
    """Tipo de acción derivado de la secuencia de acciones."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    REPLACE = "replace"
    UNKNOWN = "unknown"


class DiffKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


class ValueKind(Enum):
    """Variantes cerradas de un valor hoja."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    COMPOSITE = "composite"  # objeto/array opaco, nunca se compara clave a clave


@dataclass(frozen=True)
class AttributeValue:
    """
    Valor de un atributo.

    Para NUMBER y COMPOSITE, `value` guarda el texto JSON (compacto, claves
    ordenadas), así la igualdad es la misma a cualquier profundidad: 1 != 1.0.
    """
    kind: ValueKind
    value: Any = None

    @classmethod
    def from_json(cls, raw: Any) -> "AttributeValue":
        if raw is None:
            return cls(ValueKind.NULL)
        # bool antes que int: True es instancia de int en Python
        if isinstance(raw, bool):
            return cls(ValueKind.BOOL, raw)
        if isinstance(raw, (int, float)):
            return cls(ValueKind.NUMBER, json.dumps(raw))
        if isinstance(raw, str):
            return cls(ValueKind.STRING, raw)
        return cls(ValueKind.COMPOSITE, json.dumps(raw, sort_keys=True, separators=(",", ":"), ensure_ascii=False))

    @classmethod
    def null(cls) -> "AttributeValue":
        return cls(ValueKind.NULL)

    def render(self) -> str:
        """Texto del valor: "cadena", numeral, true/false, null o JSON compacto."""
        if self.kind is ValueKind.NULL:
            return "null"
        if self.kind is ValueKind.BOOL:
            return "true" if self.value else "false"
        if self.kind is ValueKind.STRING:
            return f'"{self.value}"'
        return self.value

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class AttributeDiffRecord:
    """Diferencia de un atributo entre before y after."""
    key: str
    kind: DiffKind
    before: Optional[AttributeValue] = None
    after: Optional[AttributeValue] = None


@dataclass(frozen=True)
class ResourceChangeModel:
    """Vista normalizada de un cambio de recurso; la consumen todos los renderers."""
    index: int
    address: str
    type: str
    actions: List[str]
    kind: ActionKind
    diff: List[AttributeDiffRecord] = field(default_factory=list)


@dataclass(frozen=True)
class PlanSummary:
    """Conteos del plan. change_count = update + replace."""
    add_count: int = 0
    change_count: int = 0
    destroy_count: int = 0

    @property
    def total(self) -> int:
        return self.add_count + self.change_count + self.destroy_count
