"""Tests for the envlayer command-line interface."""

from __future__ import annotations

import json

import pytest
import yaml
from typer.testing import CliRunner

from envlayer.cli.__main__ import app

runner = CliRunner()


@pytest.fixture
def settings_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("ENVLAYER_ENVIRONMENT", raising=False)
    monkeypatch.delenv("APP_ENVIRONMENT", raising=False)
    monkeypatch.delenv("Name", raising=False)
    (tmp_path / "appsettings.json").write_text(json.dumps({"Name": "base"}))
    (tmp_path / "appsettings.Production.json").write_text(
        json.dumps({"Name": "prod", "Db": {"Port": 5432}})
    )
    return tmp_path


def test_file_name():
    result = runner.invoke(app, ["file-name", "--env", "production"])
    assert result.exit_code == 0
    assert result.output.strip() == "appsettings.production.json"


def test_file_name_ocelot_unknown():
    result = runner.invoke(app, ["file-name", "--env", "QA", "--ocelot"])
    assert result.exit_code == 0
    assert result.output.strip() == "ocelot.json"


def test_sources(settings_dir):
    result = runner.invoke(app, ["sources", "--env", "Staging", "--base-path", str(settings_dir), "--ocelot"])
    assert result.exit_code == 0
    listed = json.loads(result.output)
    assert [s["kind"] for s in listed] == ["chained", "json_file", "environment_variables", "json_file"]
    assert listed[1]["name"] == "json:appsettings.Staging.json"
    assert listed[3]["name"] == "json:ocelot.Staging.json"


def test_show_only_loads_selected_file(settings_dir):
    result = runner.invoke(app, ["show", "--env", "Production", "--base-path", str(settings_dir)])
    assert result.exit_code == 0
    values = json.loads(result.output)
    assert values["Name"] == "prod"
    assert values["Db.Port"] == 5432


def test_show_unknown_env_uses_base(settings_dir):
    result = runner.invoke(app, ["show", "--env", "QA", "--base-path", str(settings_dir), "--format", "yaml"])
    assert result.exit_code == 0
    assert yaml.safe_load(result.output)["Name"] == "base"


def test_get_with_env_override(settings_dir, monkeypatch):
    monkeypatch.setenv("Db__Port", "6543")
    result = runner.invoke(app, ["get", "db.port", "--env", "Production", "--base-path", str(settings_dir)])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"key": "db.port", "value": "6543", "source": "env"}


def test_show_invalid_json(settings_dir):
    (settings_dir / "appsettings.Production.json").write_text("{broken")
    result = runner.invoke(app, ["show", "--env", "Production", "--base-path", str(settings_dir)])
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output
