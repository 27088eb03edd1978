"""Tests del renderer HTML."""

from __future__ import annotations

from tfplan.core.plan import TerraformPlan, build_models, summarize
from tfplan.render.html import render_html

from .conftest import resource


def _html(*entries, **kwargs) -> str:
    models = build_models(TerraformPlan.model_validate({"resource_changes": list(entries)}))
    return render_html(models, summarize(models), **kwargs)


class TestRenderHtml:
    def test_document_structure(self, models) -> None:
        document = render_html(models, summarize(models), terraform_version="1.7.5")
        assert document.startswith("<!DOCTYPE html>")
        assert "<title>Terraform Plan</title>" in document
        assert "Terraform 1.7.5" in document
        assert "function toggleResource(id)" in document
        assert document.rstrip().endswith("</html>")

    def test_resources_and_attributes(self, models) -> None:
        document = render_html(models, summarize(models))
        assert 'class="resource-header create" id="header-0" onclick="toggleResource(0)"' in document
        assert 'class="resource-header update" id="header-1"' in document
        assert "<strong>aws_instance.web</strong> will be created" in document
        assert 'id="details-1"' in document
        assert '<span class="value-new">&quot;AES256&quot;</span>' in document
        assert '<span class="value-old">null</span>' in document

    def test_summary_counts(self, models) -> None:
        document = render_html(models, summarize(models))
        assert '<span class="create">1</span> to add' in document
        assert '<span class="update">1</span> to change' in document
        assert '<span class="destroy">0</span> to destroy' in document

    def test_no_changes_is_distinct(self) -> None:
        document = _html()
        assert "No changes. Your infrastructure matches the configuration." in document
        assert "to add" not in document

    def test_collapsed_omits_details(self, models) -> None:
        document = render_html(models, summarize(models), collapsed=True)
        assert "details-0" not in document
        assert "ami-12345678" not in document
        assert "aws_instance.web" in document

    def test_escaping(self) -> None:
        document = _html(
            resource('aws_x.a["<b>"]', ["create"], after={"script": "<script>alert('x')</script>"}),
            title="Plan & <Review>",
        )
        assert "<script>alert" not in document
        assert "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;" in document
        assert "<strong>aws_x.a[&quot;&lt;b&gt;&quot;]</strong>" in document
        assert "<title>Plan &amp; &lt;Review&gt;</title>" in document

    def test_removed_attribute(self) -> None:
        document = _html(resource("a.b", ["update"], {"gone": "x"}, {}))
        assert '<span class="key">gone:</span> <span class="value-old">&quot;x&quot;</span>' in document
        assert '=&gt;</span> <span class="value-old">null</span>' in document

    def test_unknown_resource(self) -> None:
        document = _html(resource("a.b", ["no-op"], {}, {}))
        assert 'class="resource-header unknown"' in document
        assert "will be unknown" in document

    def test_idempotent(self, models) -> None:
        summary = summarize(models)
        assert render_html(models, summary) == render_html(models, summary)
