"""Tests for CLI output formatting."""

import json

import yaml

from src.cli.formatters import format_output

DEMOS = {"demos": [
    {"name": "faceted-builder", "category": "builder", "description": "Fluent person builder"},
    {"name": "clone", "category": "prototype", "description": "Deep copy through clone()"},
]}
DRINKS = {"drinks": [{"index": 0, "name": "Coffee"}, {"index": 1, "name": "Tea"}]}


class TestFormatOutput:
    """Test output formats."""

    def test_json(self):
        assert json.loads(format_output(DRINKS, "json")) == DRINKS

    def test_yaml(self):
        assert yaml.safe_load(format_output(DEMOS, "yaml")) == DEMOS

    def test_unknown_format_falls_back_to_json(self):
        assert json.loads(format_output(DRINKS, "xml")) == DRINKS

    def test_demos_table(self):
        output = format_output(DEMOS, "table")

        assert "faceted-builder" in output
        assert "prototype" in output
        assert "Category" in output

    def test_drinks_table(self):
        output = format_output(DRINKS, "table")

        assert "Coffee" in output
        assert "Tea" in output

    def test_demos_list_groups_by_category(self):
        assert format_output(DEMOS, "list").splitlines() == [
            "builder:",
            "  faceted-builder - Fluent person builder",
            "",
            "prototype:",
            "  clone - Deep copy through clone()",
        ]

    def test_drinks_list(self):
        assert format_output(DRINKS, "list") == "0: Coffee\n1: Tea"

    def test_empty_listings(self):
        assert format_output({"demos": []}, "table") == "No demos found."
        assert format_output({"drinks": []}, "list") == "No drinks available."

    def test_unknown_structure_falls_back_to_json(self):
        assert json.loads(format_output({"other": 1}, "table")) == {"other": 1}
