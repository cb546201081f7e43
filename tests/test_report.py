"""Tests for report.py - the standalone HTML page."""

from srp_insight import analyze
from srp_insight.report import render_legend, render_page, render_verdict


class TestLegend:
    def test_empty(self):
        assert "No dependencies found." in render_legend(analyze("public class Empty { }"))

    def test_bindings(self, processor):
        legend = render_legend(analyze(processor))
        assert "Parameter: orderService &rarr; Field: _orderService" in legend

        field_only = "public class S { private readonly IClock _clock = Clock.Now; }"
        assert "Field: _clock" in render_legend(analyze(field_only))

        param_only = "public class S { public S(IClock clock) { } }"
        assert "Parameter: clock</span>" in render_legend(analyze(param_only))

    def test_swatch_colors(self, processor):
        result = analyze(processor)
        legend = render_legend(result)
        for dep in result.dependencies:
            assert f"background-color: {dep.color};" in legend

    def test_selected_marked(self, processor):
        legend = render_legend(analyze(processor), "IEmailService")
        assert '<li class="dep selected" data-dependency="IEmailService">' in legend
        assert '<li class="dep" data-dependency="IOrderService">' in legend


class TestVerdict:
    def test_nothing_without_dependencies(self):
        assert render_verdict(analyze("public class Empty { }")) == ""

    def test_violation(self, processor):
        verdict = render_verdict(analyze(processor))
        assert "Potential SRP Violation Detected" in verdict
        assert "<strong>Uses IOrderService:</strong> <code>ProcessOrder</code>" in verdict
        assert "Methods mixing responsibilities" not in verdict

    def test_violation_with_mixed_methods(self, mixed_processor):
        verdict = render_verdict(analyze(mixed_processor))
        assert "Methods mixing responsibilities" in verdict
        assert "<li><code>ProcessAndNotify</code></li>" in verdict

    def test_cohesive(self, cohesive_checkout):
        verdict = render_verdict(analyze(cohesive_checkout))
        assert "Single Responsibility Maintained" in verdict


class TestPage:
    def test_complete_document(self, processor):
        page = render_page(processor, analyze(processor))
        assert page.startswith("<!DOCTYPE html>")
        assert page.rstrip().endswith("</html>")
        assert 'class="srp-method"' in page
        assert '<ul class="legend">' in page

    def test_title_escaped(self, processor):
        page = render_page(processor, analyze(processor), title="<Processor.cs>")
        assert "<title>&lt;Processor.cs&gt;</title>" in page

    def test_source_escaped(self):
        source = "public class Gen { public Gen(IRepo<Order> repo) { } }"
        page = render_page(source, analyze(source))
        assert "IRepo<Order>" not in page
        assert "IRepo&lt;Order&gt;" in page
