"""Tests for the Typer CLI, driven against the stub remote end."""

import json

import httpx
import pytest
from typer.testing import CliRunner

from bifrost import cli
from bifrost.driver import WebDriver

runner = CliRunner()


@pytest.fixture(autouse=True)
def stub_driver(monkeypatch, remote):
    monkeypatch.delenv("BIFROST_REMOTE_URL", raising=False)
    monkeypatch.delenv("BIFROST_TIMEOUT", raising=False)
    monkeypatch.setattr(
        cli, "_make_driver", lambda config: WebDriver(config, http_transport=remote.transport)
    )


def test_version():
    result = runner.invoke(cli.app, ["version"])
    assert result.exit_code == 0
    assert "Bifrost v0.1.0" in result.output


def test_url(remote):
    result = runner.invoke(cli.app, ["url", "https://example.com/"])
    assert result.exit_code == 0
    assert result.output.strip() == "https://example.com/"
    assert remote.deleted


def test_text(remote):
    result = runner.invoke(
        cli.app, ["text", "https://example.com/", "--using", "tag name", "--value", "h1"]
    )
    assert result.exit_code == 0
    assert result.output.strip() == "Example Domain"


def test_screenshot(remote, tmp_path):
    output = tmp_path / "shot.png"
    result = runner.invoke(cli.app, ["screenshot", "https://example.com/", "--output", str(output)])
    assert result.exit_code == 0
    assert output.read_bytes() == b"hello"


def test_protocol_error_exits_nonzero(remote):
    remote.overrides[("POST", "/session")] = httpx.Response(500)
    result = runner.invoke(cli.app, ["url", "https://example.com/"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_session_closed_when_command_fails(remote):
    result = runner.invoke(
        cli.app, ["text", "https://example.com/", "--using", "css selector", "--value", "#nope"]
    )
    assert result.exit_code == 1
    assert remote.deleted


def test_remote_option_overrides_config(remote, tmp_path):
    config = tmp_path / "bifrost.yaml"
    config.write_text("driver:\n  remote_url: http://localhost:1111\n")
    result = runner.invoke(
        cli.app,
        ["url", "https://example.com/", "--config", str(config), "--remote", "http://localhost:9515"],
    )
    assert result.exit_code == 0
    assert str(remote.requests[0].url).startswith("http://localhost:9515/")


def test_bad_config_file(tmp_path):
    result = runner.invoke(cli.app, ["url", "https://example.com/", "--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1


def test_init_writes_loadable_config(tmp_path):
    from bifrost.driver import DriverConfig

    result = runner.invoke(cli.app, ["init", str(tmp_path)])
    assert result.exit_code == 0

    config = DriverConfig.from_file(tmp_path / "bifrost.yaml")
    assert config.remote_url == "http://localhost:9515"
    assert config.capabilities.always_match["goog:chromeOptions"] == {"args": ["--headless"]}


def test_headed_keeps_configured_capabilities(remote, tmp_path):
    config = tmp_path / "bifrost.yaml"
    config.write_text(
        "driver:\n"
        "  capabilities:\n"
        "    always_match:\n"
        "      browserName: chrome\n"
        "      goog:chromeOptions:\n"
        "        args: [--headless, --lang=ja]\n"
    )
    result = runner.invoke(cli.app, ["url", "https://example.com/", "--config", str(config), "--headed"])
    assert result.exit_code == 0

    new_session = json.loads(remote.requests[0].content)
    assert new_session["capabilities"]["alwaysMatch"] == {
        "browserName": "chrome",
        "goog:chromeOptions": {"args": ["--lang=ja"]},
    }


def test_unknown_locator_rejected_before_any_request(remote):
    result = runner.invoke(
        cli.app, ["text", "https://example.com/", "--using", "id", "--value", "main"]
    )
    assert result.exit_code == 2
    assert remote.requests == []
