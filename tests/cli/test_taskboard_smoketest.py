import json

from typer.testing import CliRunner

from taskboard.cli import app

runner = CliRunner()


def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("serve", "task", "keyword", "init"):
        assert command in result.output


def test_keyword_add_and_list(test_board):
    result = runner.invoke(app, ["keyword", "add", "home"])
    assert result.exit_code == 0
    assert "Added: [1] home" in result.output

    result = runner.invoke(app, ["keyword", "list"])
    assert result.exit_code == 0
    assert "[1] home" in result.output


def test_task_add_list_toggle(test_board):
    runner.invoke(app, ["keyword", "add", "home"])

    result = runner.invoke(app, ["task", "add", "Buy milk", "-k", "1"])
    assert result.exit_code == 0

    result = runner.invoke(app, ["task", "list"])
    assert "[1] [ ] Buy milk #home" in result.output

    result = runner.invoke(app, ["task", "toggle", "1"])
    assert result.exit_code == 0
    assert "[1] done" in result.output


def test_task_list_json(test_board):
    runner.invoke(app, ["task", "add", "Buy milk"])

    result = runner.invoke(app, ["--json", "task", "list"])

    assert result.exit_code == 0
    assert json.loads(result.output)[0]["title"] == "Buy milk"


def test_task_add_unknown_keyword_fails(test_board):
    result = runner.invoke(app, ["task", "add", "Buy milk", "-k", "5"])

    assert result.exit_code == 1
    assert "Unknown keyword ids: 5" in result.output


def test_toggle_missing_task_fails(test_board):
    result = runner.invoke(app, ["task", "toggle", "3"])

    assert result.exit_code == 1
    assert "Task 3 not found" in result.output


def test_init_writes_config(test_board):
    result = runner.invoke(app, ["init"])

    assert result.exit_code == 0
    assert (test_board / "config.yaml").exists()
