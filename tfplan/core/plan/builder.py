"""
Construcción del modelo normalizado (ResourceChangeModel) a partir del plan.
"""

from typing import List

from tfplan.core.plan.classifier import classify
from tfplan.core.plan.differ import diff
from tfplan.core.plan.models import ResourceChangeModel, TerraformPlan


def build_models(plan: TerraformPlan) -> List[ResourceChangeModel]:
    """Clasifica y calcula el diff de cada recurso, en el orden del plan."""
    models: List[ResourceChangeModel] = []
    for index, resource in enumerate(plan.resource_changes):
        change = resource.change
        kind = classify(change.actions)
        models.append(ResourceChangeModel(
            index=index,
            address=resource.address,
            type=resource.type,
            actions=list(change.actions),
            kind=kind,
            diff=diff(change.before, change.after, kind),
        ))
    return models
