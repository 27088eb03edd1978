"""Tests del resumen del plan y de la construcción del modelo."""

from __future__ import annotations

from tfplan.core.plan import (
    NO_CHANGES_MESSAGE,
    ActionKind,
    DiffKind,
    PlanSummary,
    TerraformPlan,
    build_models,
    summarize,
    summary_message,
)

from .conftest import resource


def _models(*entries):
    return build_models(TerraformPlan.model_validate({"resource_changes": list(entries)}))


class TestBuildModels:
    def test_create_scenario(self, models) -> None:
        web = models[0]
        assert web.index == 0
        assert web.address == "aws_instance.web"
        assert web.type == "aws_instance"
        assert web.kind is ActionKind.CREATE
        assert [(r.key, r.kind) for r in web.diff] == [
            ("ami", DiffKind.ADDED),
            ("instance_type", DiffKind.ADDED),
        ]
        assert web.diff[1].after.render() == '"t3.micro"'

    def test_update_scenario(self, models) -> None:
        bucket = models[1]
        assert bucket.kind is ActionKind.UPDATE
        assert [(r.key, r.before.render(), r.after.render()) for r in bucket.diff] == [
            ("encryption", "null", '"AES256"'),
            ("versioning", "false", "true"),
        ]

    def test_replace_scenario(self) -> None:
        (model,) = _models(resource("aws_instance.app", ["delete", "create"], {"ami": "ami-old"}, {"ami": "ami-new"}))
        assert model.kind is ActionKind.REPLACE
        assert len(model.diff) == 1
        assert model.diff[0].kind is DiffKind.CHANGED

    def test_delete_has_no_records(self) -> None:
        (model,) = _models(resource("aws_instance.old", ["delete"], {"ami": "ami-123"}, None))
        assert model.kind is ActionKind.DELETE
        assert model.diff == []

    def test_order_and_duplicate_addresses_preserved(self) -> None:
        built = _models(
            resource("b.x", ["create"], after={}),
            resource("a.x", ["delete"], before={}),
            resource("b.x", ["update"], {}, {}),
        )
        assert [(m.index, m.address, m.kind) for m in built] == [
            (0, "b.x", ActionKind.CREATE),
            (1, "a.x", ActionKind.DELETE),
            (2, "b.x", ActionKind.UPDATE),
        ]


class TestSummarize:
    def test_counts(self) -> None:
        summary = summarize(_models(
            resource("a.a", ["create"]),
            resource("a.b", ["create"]),
            resource("a.c", ["update"], {}, {}),
            resource("a.d", ["delete", "create"], {}, {}),
            resource("a.e", ["delete"]),
        ))
        assert summary == PlanSummary(add_count=2, change_count=2, destroy_count=1)
        assert summary.total == 5

    def test_unknown_excluded(self) -> None:
        built = _models(
            resource("a.a", ["create"]),
            resource("a.b", ["no-op"]),
            resource("a.c", ["create", "delete"]),
        )
        summary = summarize(built)
        known = [m for m in built if m.kind is not ActionKind.UNKNOWN]
        assert summary.total == len(known) == 1

    def test_empty_plan_is_no_changes(self) -> None:
        assert summarize([]) is None

    def test_only_unknown_is_no_changes(self) -> None:
        assert summarize(_models(resource("a.a", ["read"]), resource("a.b", []))) is None

    def test_create_scenario_counts(self, models) -> None:
        summary = summarize(models)
        assert summary.add_count == 1
        assert summary.change_count == 1
        assert summary.destroy_count == 0


class TestSummaryMessage:
    def test_counts_message(self) -> None:
        message = summary_message(PlanSummary(2, 1, 1))
        assert message == "Plan: 2 to add, 1 to change, 1 to destroy."

    def test_no_changes_message(self) -> None:
        assert summary_message(None) == NO_CHANGES_MESSAGE
        assert "to add" not in summary_message(None)
