"""Tests for the storefront-e2e command line."""

import json

import pytest
from click.testing import CliRunner

from storefront_e2e.cli import main


@pytest.fixture
def runner(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TEST_USER_PASSWORD", raising=False)
    return CliRunner()


@pytest.fixture
def good_snapshot(tmp_path, consistent_cart_html):
    path = tmp_path / "cart_ok.html"
    path.write_text(consistent_cart_html, encoding="utf-8")
    return path


@pytest.fixture
def bad_snapshot(tmp_path, make_cart_page, make_cart_row):
    path = tmp_path / "cart_bad.html"
    path.write_text(make_cart_page(
        rows=[make_cart_row("Fiction", "24.00", 3, "70.00"), make_cart_row("Broken", "1.00", 1, "", omit=("subtotal",))],
        totals=[("Sub-Total:", "70.00"), ("Shipping:", "Calculated during checkout"), ("Total:", "70.00")],
    ), encoding="utf-8")
    return path


class TestVerifySnapshot:
    def test_consistent_cart_exits_zero(self, runner, good_snapshot):
        result = runner.invoke(main, ["verify-snapshot", str(good_snapshot)])

        assert result.exit_code == 0
        assert "All calculations correct" in result.output

    def test_inconsistent_cart_exits_one(self, runner, bad_snapshot):
        result = runner.invoke(main, ["verify-snapshot", str(bad_snapshot)])

        assert result.exit_code == 1
        assert "Fiction: expected 72.00, shown 70.00" in result.output

    def test_json_output(self, runner, bad_snapshot):
        result = runner.invoke(main, ["verify-snapshot", str(bad_snapshot), "--format", "json"])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["tolerance"] == 0.01
        assert payload["report"]["all_calculations_correct"] is False
        assert payload["report"]["items"][0]["expected_subtotal"] == 72.0
        assert payload["skipped_rows"] == [{"index": 1, "missing": ["subtotal"]}]
        assert payload["missing_aggregates"] == ["shipping", "tax", "discount"]

    def test_tolerance_option(self, runner, bad_snapshot):
        result = runner.invoke(main, ["verify-snapshot", str(bad_snapshot), "-f", "json", "--tolerance", "5"])

        assert result.exit_code == 0
        assert json.loads(result.output)["tolerance"] == 5.0

    def test_tolerance_from_config_file(self, runner, tmp_path, bad_snapshot):
        config = tmp_path / "storefront_e2e.yaml"
        config.write_text("verification:\n  tolerance: 3.0\n")

        result = runner.invoke(main, ["-c", str(config), "verify-snapshot", str(bad_snapshot), "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["tolerance"] == 3.0

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["verify-snapshot", str(tmp_path / "missing.html")])

        assert result.exit_code == 2


class TestShowConfig:
    def test_masks_password(self, runner, monkeypatch):
        monkeypatch.setenv("TEST_USER_PASSWORD", "hunter2")

        result = runner.invoke(main, ["show-config"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["test_user_password"] == "[SET]"
        assert "hunter2" not in result.output

    def test_prints_defaults(self, runner):
        result = runner.invoke(main, ["show-config"])

        data = json.loads(result.output)
        assert data["verification"]["tolerance"] == 0.01
        assert data["test_user_password"] is None
