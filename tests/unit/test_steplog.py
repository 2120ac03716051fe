"""Tests for console step logging and report rendering."""

import pytest
from rich.console import Console

from storefront_e2e import steplog
from storefront_e2e.models import LineItem, OrderAggregates
from storefront_e2e.pricing import verify


@pytest.fixture
def recorded(monkeypatch):
    console = Console(record=True, width=120, color_system=None)
    monkeypatch.setattr(steplog, "console", console)
    return console


def test_log_lines(recorded):
    steplog.log_step("Add products")
    steplog.log_action("Clicking [Register]", "Email: a@test.com")
    steplog.log_assertion("Totals match", passed=False)

    text = recorded.export_text()
    assert "✓ STEP: Add products - SUCCESS" in text
    assert "▶ ACTION: Clicking [Register] | Email: a@test.com" in text
    assert "✗ FAIL: Totals match" in text


def test_report_for_correct_cart(recorded):
    report = verify([LineItem("Fiction", 24.0, 2, 48.0)], OrderAggregates(subtotal=48.0, total=48.0))

    steplog.print_verification_report(report)

    text = recorded.export_text()
    assert "Fiction (2 × 24.00)" in text
    assert "All calculations correct" in text


def test_report_lists_mismatches(recorded):
    report = verify([LineItem("Fiction", 24.0, 2, 50.0)], OrderAggregates(subtotal=50.0, total=50.0))

    steplog.print_verification_report(report)

    assert "✗ Fiction: expected 48.00, shown 50.00" in recorded.export_text()
