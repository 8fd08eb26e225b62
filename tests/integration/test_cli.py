"""Integration tests for CLI."""

import json

import pytest
from click.testing import CliRunner

from catalog_lint.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def broken_catalog(valid_catalog, write_catalog):
    write_catalog(
        {
            "domains/Sales/index.mdx": """---
id: Sales
name: Sales
version: 1.0.0
summary: Everything to do with selling
owners:
  - asmith
services:
  - id: OrdersService
  - id: ShippingService
---
"""
        }
    )
    return valid_catalog


@pytest.fixture
def warning_catalog(valid_catalog, write_catalog):
    write_catalog(
        {
            ".catalogrc.yaml": "rules:\n  best-practices/summary-required: warn\n",
            "channels/orders/index.mdx": "---\nid: orders\nname: Orders\nversion: 1.0.0\nowners: [platform]\n---\n",
        }
    )
    return valid_catalog


class TestLintCommand:
    def test_valid_catalog(self, runner, valid_catalog):
        result = runner.invoke(main, [str(valid_catalog)])

        assert result.exit_code == 0
        assert "No problems found" in result.output

    def test_with_errors(self, runner, broken_catalog):
        result = runner.invoke(main, [str(broken_catalog)])

        assert result.exit_code == 1
        assert "domains/Sales/index.mdx" in result.output
        assert 'Referenced service "ShippingService" does not exist' in result.output

    def test_warnings_do_not_fail_by_default(self, runner, warning_catalog):
        result = runner.invoke(main, [str(warning_catalog)])

        assert result.exit_code == 0
        assert "best-practices/summary-required" in result.output

    def test_fail_on_warning(self, runner, warning_catalog):
        result = runner.invoke(main, [str(warning_catalog), "--fail-on-warning"])

        assert result.exit_code == 1

    def test_json_output(self, runner, broken_catalog):
        result = runner.invoke(main, [str(broken_catalog), "--format", "json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["valid"] is False
        assert data["issues"][0]["rule"] == "refs/resource-exists"

    def test_empty_catalog(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path)])

        assert result.exit_code == 0
        assert "No catalog files found" in result.output

    def test_nonexistent_directory(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing")])

        assert result.exit_code == 2
