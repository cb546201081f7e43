"""Tests for the formatters package."""

import io
import json

import pytest
from rich.console import Console

from srp_insight import analyze
from srp_insight.formatters import (
    HtmlFormatter,
    JsonFormatter,
    RichFormatter,
    get_formatter,
)
from srp_insight.models import SourceReport


def _report(source, origin="Processor.cs", selected=None):
    return SourceReport(origin=origin, source=source, result=analyze(source), selected=selected)


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("rich"), RichFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("html"), HtmlFormatter)

    def test_unknown_formatter(self):
        with pytest.raises(ValueError):
            get_formatter("csv")


class TestJsonFormatter:
    def test_one_entry_per_report(self, processor, cohesive_checkout):
        text = JsonFormatter().format(
            [_report(processor), _report(cohesive_checkout, origin="Checkout.cs")]
        )
        data = json.loads(text)
        assert [entry["origin"] for entry in data] == ["Processor.cs", "Checkout.cs"]
        assert data[0]["has_multiple_responsibilities"] is True
        assert data[1]["has_multiple_responsibilities"] is False

    def test_empty(self):
        assert json.loads(JsonFormatter().format([])) == []


class TestHtmlFormatter:
    def test_page_per_report(self, processor):
        text = HtmlFormatter().format([_report(processor)])
        assert text.count("<!DOCTYPE html>") == 1
        assert "SRP Insight: Processor.cs" in text
        assert 'class="srp-highlight"' in text

    def test_selection_carried(self, processor):
        text = HtmlFormatter().format([_report(processor, selected="IEmailService")])
        assert 'data-dependency="IOrderService" style' not in text
        assert 'data-dependency="IEmailService" style' in text


class TestRichFormatter:
    def _render(self, *reports):
        buffer = io.StringIO()
        RichFormatter(Console(file=buffer, width=120, no_color=True)).render(list(reports))
        return buffer.getvalue()

    def test_violation_report(self, processor):
        output = self._render(_report(processor))
        assert "Processor.cs" in output
        assert "IOrderService" in output
        assert "orderService -> _orderService" in output
        assert "SendConfirmationEmail" in output
        assert "Potential SRP Violation Detected" in output

    def test_cohesive_report(self, cohesive_checkout):
        output = self._render(_report(cohesive_checkout, origin="Checkout.cs"))
        assert "Single Responsibility Maintained" in output

    def test_no_dependencies(self):
        output = self._render(_report("public class Empty { }", origin="Empty.cs"))
        assert "No injected dependencies found." in output

    def test_format_returns_empty_string(self, processor):
        buffer = io.StringIO()
        formatter = RichFormatter(Console(file=buffer, width=120))
        assert formatter.format([_report(processor)]) == ""
        assert "IEmailService" in buffer.getvalue()
