"""
Renderer HTML: documento autónomo con secciones expandibles por recurso.
"""

from html import escape
from typing import List, Optional, Sequence

from tfplan.core.plan.models import (
    AttributeDiffRecord,
    DiffKind,
    PlanSummary,
    ResourceChangeModel,
)
from tfplan.core.plan.summary import summary_message
from tfplan.render.styles import COLLAPSED_INDICATOR, style_for


STYLESHEET = """\
        body { font-family: 'Monaco', 'Menlo', monospace; background: #1e1e1e; color: #d4d4d4; padding: 20px; }
        .resource { margin: 10px 0; }
        .resource-header { cursor: pointer; padding: 8px; border-radius: 4px; background: #2d2d30; }
        .resource-header:hover { background: #3e3e42; }
        .create { color: #4ec9b0; }
        .update { color: #dcdcaa; }
        .destroy { color: #f44747; }
        .replace { color: #dcdcaa; }
        .unknown { color: #d4d4d4; }
        .details { margin-left: 20px; padding: 10px; background: #252526; border-radius: 4px; display: none; }
        .attribute { margin: 4px 0; }
        .key { color: #9cdcfe; }
        .value-old { color: #f44747; }
        .value-new { color: #4ec9b0; }
        .arrow { color: #808080; }
        .meta { color: #808080; }
        .summary { margin-top: 20px; padding: 15px; background: #2d2d30; border-radius: 4px; border-top: 3px solid #007acc; }
        .no-changes { color: #4ec9b0; }
        .expand-icon { display: inline-block; width: 12px; transition: transform 0.2s; }
        .expanded .expand-icon { transform: rotate(90deg); }"""

SCRIPT = """\
        function toggleResource(id) {
            const details = document.getElementById('details-' + id);
            const header = document.getElementById('header-' + id);
            if (!details) {
                return;
            }
            if (details.style.display !== 'block') {
                details.style.display = 'block';
                header.classList.add('expanded');
            } else {
                details.style.display = 'none';
                header.classList.remove('expanded');
            }
        }"""


def _span(css_class: str, text: str) -> str:
    return f'<span class="{css_class}">{escape(text)}</span>'


def render_attribute(record: AttributeDiffRecord) -> str:
    parts = [_span("key", f"{record.key}:")]
    if record.kind is DiffKind.ADDED:
        parts.append(_span("value-new", record.after.render()))
    else:
        parts.append(_span("value-old", record.before.render()))
        parts.append('<span class="arrow">=&gt;</span>')
        new_class = "value-old" if record.kind is DiffKind.REMOVED else "value-new"
        parts.append(_span(new_class, record.after.render()))
    return '            <div class="attribute">' + " ".join(parts) + "</div>"


def render_resource(model: ResourceChangeModel, collapsed: bool = False) -> str:
    action = style_for(model.kind)
    i = model.index
    lines = [
        '    <div class="resource">',
        f'        <div class="resource-header {action.css_class}" id="header-{i}" onclick="toggleResource({i})">',
        f'            <span class="expand-icon">{COLLAPSED_INDICATOR}</span> {escape(action.symbol)} '
        f"<strong>{escape(model.address)}</strong> will be {action.label}",
        "        </div>",
    ]
    if not collapsed:
        lines.append(f'        <div class="details" id="details-{i}">')
        lines.extend(render_attribute(record) for record in model.diff)
        lines.append("        </div>")
    lines.append("    </div>")
    return "\n".join(lines)


def render_summary(summary: Optional[PlanSummary]) -> str:
    if summary is None:
        body = f'<p class="no-changes">{escape(summary_message(None))}</p>'
    else:
        body = (
            f'<p>Plan: <span class="create">{summary.add_count}</span> to add, '
            f'<span class="update">{summary.change_count}</span> to change, '
            f'<span class="destroy">{summary.destroy_count}</span> to destroy.</p>'
        )
    return "\n".join([
        '    <div class="summary">',
        "        <h3>Plan Summary</h3>",
        f"        {body}",
        "    </div>",
    ])


def render_html(
    models: Sequence[ResourceChangeModel],
    summary: Optional[PlanSummary],
    collapsed: bool = False,
    title: str = "Terraform Plan",
    terraform_version: Optional[str] = None,
) -> str:
    """
    Genera el documento HTML completo.

    Args:
        models: Recursos normalizados, en orden del plan
        summary: Resumen (None = sin cambios)
        collapsed: Si True, no se emiten los atributos de cada recurso
        title: Título del documento
        terraform_version: Versión de Terraform que generó el plan (opcional)
    """
    lines: List[str] = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '    <meta charset="utf-8">',
        f"    <title>{escape(title)}</title>",
        "    <style>",
        STYLESHEET,
        "    </style>",
        "</head>",
        "<body>",
        f"    <h1>{escape(title)}</h1>",
    ]
    if terraform_version:
        lines.append(f'    <p class="meta">Terraform {escape(terraform_version)}</p>')

    lines.extend(render_resource(model, collapsed) for model in models)
    lines.append(render_summary(summary))
    lines.extend([
        "    <script>",
        SCRIPT,
        "    </script>",
        "</body>",
        "</html>",
        "",
    ])
    return "\n".join(lines)
