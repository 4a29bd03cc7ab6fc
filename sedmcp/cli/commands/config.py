# sedmcp/cli/commands/config.py
# `sedmcp config` sub-app: inspect & edit the persisted settings file

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

import typer

from ...config.settings import SedSettings, settings_manager
from ...core.exceptions import SettingsValidationError
from ...sed_io.console import console
from ...ui.theme import (
    SedColors,
    format_setting_value,
    styled_setting_line,
    styled_success_line,
)
from ..app import app

config_app = typer.Typer(rich_markup_mode="rich", help="Manage sedmcp settings")
app.add_typer(config_app, name="config")

SETTING_KEYS = frozenset(f.name for f in fields(SedSettings))


def _require_known(key: str) -> str:
    if key not in SETTING_KEYS:
        known = ", ".join(sorted(SETTING_KEYS))
        raise typer.BadParameter(f"Unknown setting: {key} (known: {known})")
    return key


# "7" -> 7, "true" -> True, "null" -> None; anything that isn't JSON stays a string
def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _show_settings() -> None:
    console.print()
    console.print(f"[bold {SedColors.ACCENT}]Current Configuration[/]")
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]")
    console.print()
    for key, value in settings_manager.list_settings().items():
        console.print(*styled_setting_line(key, format_setting_value(value)))
    console.print()
    console.print("[dim]Run[/] sedmcp config --help [dim]for subcommands[/]")


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _show_settings()


# * Value is printed as JSON so strings come out quoted
@config_app.command()
def get(key: str) -> None:
    typer.echo(json.dumps(settings_manager.get(_require_known(key))))


@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    parsed = _parse_value(value)
    try:
        settings_manager.set(_require_known(key), parsed)
    except (ValueError, TypeError, SettingsValidationError) as e:
        raise typer.BadParameter(str(e))
    console.print(*styled_success_line(f"Set {key}", json.dumps(parsed)))


@config_app.command()
def reset() -> None:
    settings_manager.reset()
    console.print(*styled_success_line("Reset settings to defaults"))


@config_app.command()
def path() -> None:
    typer.echo(str(settings_manager.config_path))


@config_app.command(name="list")
def list_cmd() -> None:
    _show_settings()
