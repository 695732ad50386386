"""Unit tests for output formatters."""

import json

import yaml

from aura_session.utils.ui.formatters import (
    _flatten,
    format_error,
    format_output,
    format_success,
    format_warning,
)


class TestFlatten:
    def test_nested(self):
        assert _flatten({"a": {"b": 1, "c": {"d": 2}}, "e": 3}) == [
            ("a.b", 1),
            ("a.c.d", 2),
            ("e", 3),
        ]

    def test_scalar(self):
        assert _flatten(5) == [("value", 5)]


class TestFormatOutput:
    def test_json(self, capsys):
        format_output({"duration": 70, "tones": ["#ffffff"]}, "json")

        assert json.loads(capsys.readouterr().out) == {"duration": 70, "tones": ["#ffffff"]}

    def test_yaml(self, capsys):
        format_output({"seed": "#8AA3FF", "sprints": 3}, "yaml")

        assert yaml.safe_load(capsys.readouterr().out) == {"seed": "#8AA3FF", "sprints": 3}

    def test_table(self, capsys):
        format_output({"defaults": {"duration": 70}}, "table")

        out = capsys.readouterr().out
        assert "defaults.duration" in out
        assert "70" in out


class TestMessages:
    def test_error(self, capsys):
        format_error("boom")
        assert "Error: boom" in capsys.readouterr().out

    def test_success(self, capsys):
        format_success("done")
        assert "Success: done" in capsys.readouterr().out

    def test_warning(self, capsys):
        format_warning("careful")
        assert "Warning: careful" in capsys.readouterr().out
