"""
Resumen del plan: conteos add/change/destroy.
"""

from typing import Iterable, Optional

from tfplan.core.plan.models import ActionKind, PlanSummary, ResourceChangeModel


NO_CHANGES_MESSAGE = "No changes. Your infrastructure matches the configuration."


def summarize(models: Iterable[ResourceChangeModel]) -> Optional[PlanSummary]:
    """
    Cuenta acciones del plan completo.

    UNKNOWN no cuenta en ningún grupo. Si no hay ningún cambio contado devuelve
    None (estado "sin cambios"), nunca un PlanSummary con todo a cero.
    """
    add = change = destroy = 0
    for model in models:
        if model.kind is ActionKind.CREATE:
            add += 1
        elif model.kind in (ActionKind.UPDATE, ActionKind.REPLACE):
            change += 1
        elif model.kind is ActionKind.DELETE:
            destroy += 1

    if add + change + destroy == 0:
        return None
    return PlanSummary(add_count=add, change_count=change, destroy_count=destroy)


def summary_message(summary: Optional[PlanSummary]) -> str:
    """Texto canónico del resumen, compartido por todos los renderers."""
    if summary is None:
        return NO_CHANGES_MESSAGE
    return (
        f"Plan: {summary.add_count} to add, {summary.change_count} to change, "
        f"{summary.destroy_count} to destroy."
    )
