"""
Estilos por tipo de acción: símbolo, etiqueta, estilo Rich y clase CSS.

Mapeo cerrado y único; ningún renderer decide colores comparando cadenas.
"""

from dataclasses import dataclass
from typing import Dict

from tfplan.core.plan.models import ActionKind


@dataclass(frozen=True)
class ActionStyle:
    symbol: str
    label: str
    style: str  # estilo Rich (ANSI)
    css_class: str


ACTION_STYLES: Dict[ActionKind, ActionStyle] = {
    ActionKind.CREATE: ActionStyle("+", "created", "bright_green", "create"),
    ActionKind.UPDATE: ActionStyle("~", "changed", "bright_yellow", "update"),
    ActionKind.DELETE: ActionStyle("-", "destroyed", "bright_red", "destroy"),
    ActionKind.REPLACE: ActionStyle("-/+", "replaced", "bright_yellow", "replace"),
    ActionKind.UNKNOWN: ActionStyle("?", "unknown", "white", "unknown"),
}

EXPANDED_INDICATOR = "▼"
COLLAPSED_INDICATOR = "▶"

RULE = "─" * 80
ATTRIBUTE_INDENT = " " * 8


def style_for(kind: ActionKind) -> ActionStyle:
    return ACTION_STYLES[kind]
