# sedmcp/config/settings.py
# Configuration management for sedmcp: display defaults, default flags & server identity

import os
from pathlib import Path
from typing import Dict, Any, Optional, cast
import typer
from dataclasses import dataclass, asdict

from ..sed_io.generics import read_json_safe, write_json_safe
from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..core.validation import unrecognized_flags

# environment variable overriding the config file location (.env supported)
CONFIG_ENV_VAR = "SEDMCP_CONFIG"


# * Default settings dataclass w/ validation of every field
@dataclass
class SedSettings:
    # flags applied when a command gives none
    default_flags: str = ""

    # report rendering
    show_changes: bool = True
    max_changes_shown: int = 50
    show_original: bool = False

    # dev mode setting (enables DEBUG output)
    dev_mode: bool = False

    # serverInfo reported by the MCP initialize handshake
    server_name: str = "sed-mcp"
    server_version: str = "0.0.1"

    def __post_init__(self) -> None:
        if not isinstance(self.default_flags, str):
            raise SettingsValidationError(
                f"default_flags must be a string, got {type(self.default_flags).__name__}",
                "default_flags",
                self.default_flags,
            )
        unknown = unrecognized_flags(self.default_flags)
        if unknown:
            raise SettingsValidationError(
                f"default_flags may only contain g, i, m, s; got '{''.join(unknown)}'",
                "default_flags",
                self.default_flags,
            )

        # strict bool validation (no coercion)
        for name in ("show_changes", "show_original", "dev_mode"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise SettingsValidationError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}",
                    name,
                    value,
                )

        if (
            isinstance(self.max_changes_shown, bool)
            or not isinstance(self.max_changes_shown, int)
            or self.max_changes_shown < 1
        ):
            raise SettingsValidationError(
                f"max_changes_shown must be a positive integer, got {self.max_changes_shown}",
                "max_changes_shown",
                self.max_changes_shown,
            )

        for name in ("server_name", "server_version"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise SettingsValidationError(
                    f"{name} must be a non-empty string", name, value
                )


# * Resolve config path: explicit arg > SEDMCP_CONFIG env var > ~/.sedmcp/config.json
def default_config_path() -> Path:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".sedmcp" / "config.json"


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self._explicit_path = config_path
        self._settings: Optional[SedSettings] = None

    @property
    def config_path(self) -> Path:
        return self._explicit_path or default_config_path()

    @config_path.setter
    def config_path(self, value: Optional[Path]) -> None:
        self._explicit_path = value
        self._settings = None

    # load settings from file or return defaults
    def load(self) -> SedSettings:
        if self._settings is not None:
            return self._settings

        path = self.config_path
        if path.exists():
            try:
                data = read_json_safe(path)
                self._settings = SedSettings(**data)
            except (JSONParsingError, TypeError, ValueError, SettingsValidationError) as e:
                typer.echo(f"Warning: Invalid config file {path}: {e}", err=True)
                typer.echo("Using default settings", err=True)
                self._settings = SedSettings()
        else:
            self._settings = SedSettings()

        return self._settings

    def save(self, settings: SedSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a value; the full settings object is re-validated before saving
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ValueError(f"Unknown setting: {key}")

        data = asdict(settings)
        data[key] = value
        self.save(SedSettings(**data))

    def reset(self) -> None:
        self.save(SedSettings())

    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: Optional[typer.Context], provided: Optional[SedSettings] = None
) -> SedSettings:
    if provided is not None:
        return provided

    candidates: list[typer.Context] = []
    if ctx is not None:
        candidates.append(ctx)
        parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
        if parent is not None:
            candidates.append(parent)
        find_root = getattr(ctx, "find_root", None)
        root_ctx = (
            cast(Optional[typer.Context], find_root()) if callable(find_root) else None
        )
        if root_ctx is not None:
            candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, SedSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
