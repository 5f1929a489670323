"""
Тесты CLI.
"""

from unittest.mock import patch

from click.testing import CliRunner

from cli import cli


def test_routes_lists_article_endpoints():
    result = CliRunner().invoke(cli, ["routes"])

    assert result.exit_code == 0
    assert "/articles" in result.output
    assert "DELETE" in result.output


def test_show_config():
    result = CliRunner().invoke(cli, ["show-config"])

    assert result.exit_code == 0
    assert "default_page_size" in result.output


def test_serve_runs_uvicorn():
    with patch("uvicorn.run") as run:
        result = CliRunner().invoke(cli, ["serve", "--port", "9001"])

    assert result.exit_code == 0
    args, kwargs = run.call_args
    assert args == ("src.main:app",)
    assert kwargs["port"] == 9001


def test_serve_accepts_port_zero():
    with patch("uvicorn.run") as run:
        result = CliRunner().invoke(cli, ["serve", "--port", "0"])

    assert result.exit_code == 0
    assert run.call_args.kwargs["port"] == 0
