"""
Diff de atributos entre snapshots before/after.

Lógica pura: los valores son hojas opacas a un solo nivel; objetos y arrays
anidados se comparan enteros y nunca se recorren clave a clave.
"""

from typing import Any, Dict, List, Optional

from tfplan.core.plan.models import (
    ActionKind,
    AttributeDiffRecord,
    AttributeValue,
    DiffKind,
)


def _as_snapshot(raw: Any) -> Optional[Dict[str, Any]]:
    """Un snapshot solo es válido si es un objeto JSON; cualquier otra cosa cuenta como ausente."""
    return raw if isinstance(raw, dict) else None


def _added(after: Dict[str, Any]) -> List[AttributeDiffRecord]:
    return [
        AttributeDiffRecord(key=key, kind=DiffKind.ADDED, after=AttributeValue.from_json(after[key]))
        for key in sorted(after)
    ]


def _changed(before: Dict[str, Any], after: Dict[str, Any]) -> List[AttributeDiffRecord]:
    records: List[AttributeDiffRecord] = []

    for key in sorted(after):
        after_val = AttributeValue.from_json(after[key])
        if key not in before:
            records.append(AttributeDiffRecord(key=key, kind=DiffKind.ADDED, after=after_val))
            continue
        before_val = AttributeValue.from_json(before[key])
        if before_val != after_val:
            records.append(AttributeDiffRecord(
                key=key, kind=DiffKind.CHANGED, before=before_val, after=after_val
            ))

    # Claves eliminadas: se muestran como transición a null
    for key in sorted(before):
        if key not in after:
            records.append(AttributeDiffRecord(
                key=key,
                kind=DiffKind.REMOVED,
                before=AttributeValue.from_json(before[key]),
                after=AttributeValue.null(),
            ))

    return records


def diff(before: Any, after: Any, kind: ActionKind) -> List[AttributeDiffRecord]:
    """
    Calcula los registros de diff para un recurso.

    Args:
        before: Snapshot antes del cambio (o None)
        after: Snapshot después del cambio (o None)
        kind: Acción ya clasificada del recurso

    Returns:
        Lista ordenada de AttributeDiffRecord (vacía para DELETE, UNKNOWN,
        o si falta algún snapshot requerido)
    """
    before_obj = _as_snapshot(before)
    after_obj = _as_snapshot(after)

    if kind is ActionKind.CREATE:
        return _added(after_obj) if after_obj is not None else []

    if kind in (ActionKind.UPDATE, ActionKind.REPLACE):
        if before_obj is None or after_obj is None:
            return []
        return _changed(before_obj, after_obj)

    return []
