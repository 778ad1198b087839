from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml

from ..core.builder import ConfigurationBuilder, create_default_builder
from ..core.environment import resolve_environment_name
from ..core.extensions import (
    APP_SETTINGS_BASE,
    APP_SETTINGS_PREFIX,
    OCELOT_BASE,
    OCELOT_PREFIX,
    add_ocelot_config,
    initialize,
    select_file_name,
)
from ..log import configure_logging

app = typer.Typer(help="envlayer CLI")


class OutputFormat(str, Enum):
    json = "json"
    yaml = "yaml"


@app.callback()
def main(log_level: Optional[str] = typer.Option(None, "--log-level", help="Defaults to ENVLAYER_LOG_LEVEL")):
    configure_logging(log_level)


def _builder(env: Optional[str], base_path: Optional[Path], ocelot: bool) -> ConfigurationBuilder:
    environment = env or resolve_environment_name()
    builder = initialize(create_default_builder(environment, base_path=base_path), environment)
    if ocelot:
        add_ocelot_config(builder, environment)
    return builder


def _fail(err: Exception) -> NoReturn:
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


@app.command()
def sources(
    env: Optional[str] = typer.Option(None, "--env"),
    base_path: Optional[Path] = typer.Option(None, "--base-path"),
    ocelot: bool = typer.Option(False, "--ocelot"),
):
    builder = _builder(env, base_path, ocelot)
    typer.echo(json.dumps([s.describe() for s in builder.sources], indent=2))


@app.command("file-name")
def file_name(
    env: Optional[str] = typer.Option(None, "--env"),
    ocelot: bool = typer.Option(False, "--ocelot"),
):
    environment = env or resolve_environment_name()
    if ocelot:
        typer.echo(select_file_name(OCELOT_PREFIX, OCELOT_BASE, environment))
    else:
        typer.echo(select_file_name(APP_SETTINGS_PREFIX, APP_SETTINGS_BASE, environment))


@app.command()
def show(
    env: Optional[str] = typer.Option(None, "--env"),
    base_path: Optional[Path] = typer.Option(None, "--base-path"),
    ocelot: bool = typer.Option(False, "--ocelot"),
    output: OutputFormat = typer.Option(OutputFormat.json, "--format"),
):
    try:
        cfg = _builder(env, base_path, ocelot).build()
    except (FileNotFoundError, ValueError) as err:
        _fail(err)
    values = dict(sorted(cfg.values().items()))
    if output is OutputFormat.yaml:
        typer.echo(yaml.safe_dump(values, sort_keys=False), nl=False)
    else:
        typer.echo(json.dumps(values, indent=2, default=str))


@app.command()
def get(
    key: str,
    env: Optional[str] = typer.Option(None, "--env"),
    base_path: Optional[Path] = typer.Option(None, "--base-path"),
):
    try:
        cfg = _builder(env, base_path, False).build()
    except (FileNotFoundError, ValueError) as err:
        _fail(err)
    prov = cfg.provenance(key)
    typer.echo(json.dumps({"key": key, "value": cfg.get(key), "source": prov.source_name if prov else None}, indent=2))


if __name__ == "__main__":
    app()
