"""
Clasificación de acciones: secuencia de acciones → ActionKind.

Única implementación de la regla; la usan el builder, el resumen y todos los renderers.
"""

from typing import Dict, Sequence, Tuple

from loguru import logger

from tfplan.core.plan.models import ActionKind


# Formas exactas reconocidas (orden y longitud importan)
_ACTION_SHAPES: Dict[Tuple[str, ...], ActionKind] = {
    ("create",): ActionKind.CREATE,
    ("update",): ActionKind.UPDATE,
    ("delete",): ActionKind.DELETE,
    ("delete", "create"): ActionKind.REPLACE,
}


def classify(actions: Sequence[str]) -> ActionKind:
    """
    Clasifica una secuencia de acciones.

    Cualquier forma no reconocida (vacía, acción desconocida, ["create", "delete"], ...)
    devuelve ActionKind.UNKNOWN; nunca lanza.
    """
    kind = _ACTION_SHAPES.get(tuple(actions), ActionKind.UNKNOWN)
    if kind is ActionKind.UNKNOWN:
        logger.debug("Acciones no reconocidas: {}", list(actions))
    return kind
