"""Tests del renderer de texto (plano y ANSI)."""

from __future__ import annotations

import io

from rich.console import Console

from tfplan.core.plan import TerraformPlan, build_models, summarize
from tfplan.render.styles import RULE
from tfplan.render.text import format_plan, render_plan

from .conftest import resource


EXPECTED_EXPANDED = (
    "▼ + aws_instance.web will be created\n"
    '        ami: "ami-12345678"\n'
    '        instance_type: "t3.micro"\n'
    "\n"
    "▼ ~ aws_s3_bucket.data will be changed\n"
    '        encryption: null => "AES256"\n'
    "        versioning: false => true\n"
    "\n"
    "\n"
    f"{RULE}\n"
    "\n"
    "Plan: 1 to add, 1 to change, 0 to destroy.\n"
)


def _render(*entries, collapsed=False) -> str:
    models = build_models(TerraformPlan.model_validate({"resource_changes": list(entries)}))
    return format_plan(models, summarize(models), collapsed=collapsed)


class TestFormatPlan:
    def test_expanded_exact(self, models) -> None:
        assert format_plan(models, summarize(models)) == EXPECTED_EXPANDED

    def test_collapsed(self, models) -> None:
        output = format_plan(models, summarize(models), collapsed=True)
        assert "▶ + aws_instance.web will be created" in output
        assert "▶ ~ aws_s3_bucket.data will be changed" in output
        assert "Plan: 1 to add, 1 to change, 0 to destroy." in output
        assert "ami:" not in output

    def test_collapsed_keeps_classification(self, models) -> None:
        summary = summarize(models)
        format_plan(models, summary, collapsed=True)
        assert [len(m.diff) for m in models] == [2, 2]

    def test_idempotent(self, models) -> None:
        summary = summarize(models)
        assert format_plan(models, summary) == format_plan(models, summary)
        assert format_plan(models, summary, True) == format_plan(models, summary, True)

    def test_rule_is_80_wide(self) -> None:
        assert len(RULE) == 80

    def test_empty_plan(self) -> None:
        output = _render()
        assert "No changes. Your infrastructure matches the configuration." in output
        assert "to add" not in output

    def test_delete_header_only(self) -> None:
        output = _render(resource("aws_instance.test", ["delete"], {"ami": "ami-123"}, None))
        assert "▼ - aws_instance.test will be destroyed\n\n" in output
        assert "ami" not in output
        assert "Plan: 0 to add, 0 to change, 1 to destroy." in output

    def test_replace(self) -> None:
        output = _render(resource("aws_instance.test", ["delete", "create"], {"ami": "ami-old"}, {"ami": "ami-new"}))
        assert "▼ -/+ aws_instance.test will be replaced" in output
        assert 'ami: "ami-old" => "ami-new"' in output

    def test_removed_rendered_as_change_to_null(self) -> None:
        output = _render(resource("a.b", ["update"], {"size": "small", "gone": 3}, {"size": "large"}))
        assert 'size: "small" => "large"' in output
        assert "gone: 3 => null" in output

    def test_unknown_rendered_with_marker(self) -> None:
        output = _render(resource("data.aws_ami.x", ["read"], None, {"id": "1"}))
        assert "▼ ? data.aws_ami.x will be unknown" in output
        assert "id:" not in output
        assert "No changes." in output


class TestAnsiOutput:
    def test_plain_text_matches_ansi_content(self, models) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, force_terminal=True, color_system="standard", width=200)
        console.print(render_plan(models, summarize(models)), end="", soft_wrap=True)
        output = buffer.getvalue()
        assert "\x1b[" in output
        assert "aws_instance.web" in output
        assert "will be" in output

    def test_no_color_console(self, models) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, color_system=None, width=200)
        console.print(render_plan(models, summarize(models)), end="", soft_wrap=True)
        assert "\x1b[" not in buffer.getvalue()
        assert "Plan: 1 to add, 1 to change, 0 to destroy." in buffer.getvalue()
