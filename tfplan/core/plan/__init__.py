"""
Plan: modelos, carga, clasificación, diff y resumen.

Lógica pura; sin dependencias de CLI ni de renderers.
"""

from tfplan.core.plan.models import (
    ActionKind,
    AttributeDiffRecord,
    AttributeValue,
    DiffKind,
    PlanSummary,
    ResourceChangeModel,
    TerraformPlan,
    ValueKind,
)
from tfplan.core.plan.classifier import classify
from tfplan.core.plan.differ import diff
from tfplan.core.plan.summary import NO_CHANGES_MESSAGE, summarize, summary_message
from tfplan.core.plan.builder import build_models
from tfplan.core.plan.loader import load_plan_file, load_plan_stream, parse_plan

__all__ = [
    "ActionKind",
    "AttributeDiffRecord",
    "AttributeValue",
    "DiffKind",
    "PlanSummary",
    "ResourceChangeModel",
    "TerraformPlan",
    "ValueKind",
    "classify",
    "diff",
    "summarize",
    "summary_message",
    "NO_CHANGES_MESSAGE",
    "build_models",
    "load_plan_file",
    "load_plan_stream",
    "parse_plan",
]
