from __future__ import annotations

import json

from typer.testing import CliRunner

from utilkit.__main__ import app

runner = CliRunner()


def test_case_command():
    result = runner.invoke(app, ["case", "snake", "XMLHttpRequest"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "xml_http_request"

    result = runner.invoke(app, ["case", "title", "hello_world"])
    assert result.stdout.strip() == "Hello World"


def test_case_command_rejects_unknown_style():
    result = runner.invoke(app, ["case", "shouting", "x"])
    assert result.exit_code != 0


def test_split_command_prints_json():
    result = runner.invoke(app, ["split", "fooBar baz"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == ["foo", "Bar", "baz"]


def test_prefix_command():
    result = runner.invoke(app, ["prefix", "interstellar", "internet", "internal"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "inter"


def test_range_command():
    result = runner.invoke(app, ["range", "3", "6"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [3, 4, 5, 6]


def test_range_command_safe_flag():
    result = runner.invoke(app, ["range", "6", "3", "--safe"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [3, 4, 5, 6]


def test_range_command_inverted_bounds_exit_code():
    result = runner.invoke(app, ["range", "6", "3"])
    assert result.exit_code == 2
    assert "out of range" in result.output


def test_json_indent_setting(monkeypatch):
    from utilkit.config import get_settings

    monkeypatch.setenv("UTILKIT_JSON_INDENT", "2")
    get_settings.cache_clear()
    result = runner.invoke(app, ["range", "1", "2"])
    assert result.stdout == "[\n  1,\n  2\n]\n"
