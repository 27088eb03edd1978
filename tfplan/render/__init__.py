"""
Renderers: consumen ResourceChangeModel + PlanSummary; no recalculan acciones ni diffs.
"""

from tfplan.render.text import format_plan, render_plan
from tfplan.render.html import render_html
from tfplan.render.interactive import run_interactive, stream_reader

__all__ = ["format_plan", "render_plan", "render_html", "run_interactive", "stream_reader"]
