"""
Renderer de texto: vista estática (plano o con colores ANSI vía Rich).

Todo se construye como rich.text.Text; `.plain` da exactamente el mismo
contenido sin estilos, así texto plano y ANSI nunca divergen.
"""

from typing import Optional, Sequence

from rich.text import Text

from tfplan.core.plan.models import (
    AttributeDiffRecord,
    DiffKind,
    PlanSummary,
    ResourceChangeModel,
)
from tfplan.core.plan.summary import summary_message
from tfplan.render.styles import (
    ATTRIBUTE_INDENT,
    COLLAPSED_INDICATOR,
    EXPANDED_INDICATOR,
    RULE,
    style_for,
)


def render_record(record: AttributeDiffRecord) -> Text:
    """Una línea de atributo: 'key: after' o 'key: before => after'."""
    line = Text(ATTRIBUTE_INDENT)
    line.append(record.key, style="bright_white")
    line.append(": ")
    if record.kind is DiffKind.ADDED:
        line.append(record.after.render(), style="bright_green")
    else:
        # REMOVED lleva after = null, se muestra igual que un cambio a null
        line.append(record.before.render(), style="bright_red")
        line.append(" ")
        line.append("=>", style="bright_black")
        line.append(" ")
        line.append(
            record.after.render(),
            style="bright_red" if record.kind is DiffKind.REMOVED else "bright_green",
        )
    return line


def render_header(model: ResourceChangeModel, expanded: bool) -> Text:
    """Cabecera del recurso: '▼ + aws_instance.web will be created'."""
    action = style_for(model.kind)
    header = Text()
    header.append(EXPANDED_INDICATOR if expanded else COLLAPSED_INDICATOR, style="bright_black")
    header.append(" ")
    header.append(action.symbol, style=f"bold {action.style}")
    header.append(" ")
    header.append(model.address, style="bold")
    header.append(" will be ")
    header.append(action.label, style=action.style)
    return header


def render_resource(model: ResourceChangeModel, expanded: bool) -> Text:
    """Cabecera, atributos (si está expandido) y línea en blanco final."""
    block = render_header(model, expanded)
    block.append("\n")
    if expanded:
        for record in model.diff:
            block.append_text(render_record(record))
            block.append("\n")
    block.append("\n")
    return block


def render_summary(summary: Optional[PlanSummary]) -> Text:
    if summary is None:
        return Text(summary_message(None), style="bright_green")
    line = Text()
    line.append("Plan", style="bold")
    line.append(": ")
    line.append(str(summary.add_count), style="bright_green")
    line.append(" to add, ")
    line.append(str(summary.change_count), style="bright_yellow")
    line.append(" to change, ")
    line.append(str(summary.destroy_count), style="bright_red")
    line.append(" to destroy.")
    return line


def render_plan(
    models: Sequence[ResourceChangeModel],
    summary: Optional[PlanSummary],
    collapsed: bool = False,
) -> Text:
    """Vista completa: recursos, separador y resumen."""
    output = Text()
    for model in models:
        output.append_text(render_resource(model, expanded=not collapsed))
    output.append("\n")
    output.append(RULE, style="bright_black")
    output.append("\n\n")
    output.append_text(render_summary(summary))
    output.append("\n")
    return output


def format_plan(
    models: Sequence[ResourceChangeModel],
    summary: Optional[PlanSummary],
    collapsed: bool = False,
) -> str:
    """Vista completa como texto plano."""
    return render_plan(models, summary, collapsed).plain
