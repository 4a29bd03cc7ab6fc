# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    sed_dir = fake_home / ".sedmcp"
    sed_dir.mkdir()

    # minimal config.json w/ test defaults
    config_data = {
        "default_flags": "",
        "show_changes": True,
        "max_changes_shown": 50,
        "show_original": False,
        "dev_mode": False,
    }
    config_file = sed_dir / "config.json"
    with open(config_file, "w") as f:
        json.dump(config_data, f, indent=2)

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("SEDMCP_CONFIG", raising=False)

    # ! reset global settings_manager state & point it at the isolated location
    from sedmcp.config.settings import settings_manager

    settings_manager.config_path = config_file

    # ! reset output manager to NullOutputManager & console to stdout
    from sedmcp.core.output import reset_output_manager
    from sedmcp.sed_io.console import reset_console

    reset_output_manager()
    reset_console()

    yield fake_home

    reset_output_manager()
    reset_console()


@pytest.fixture
def engine():
    from sedmcp.core.engine import TransformationEngine

    return TransformationEngine()


@pytest.fixture
def sample_log():
    # Provide sample multi-line content for line-oriented operations
    return "\n".join(
        [
            "INFO starting up",
            "ERROR disk full",
            "INFO retrying",
            "error: lowercase failure",
            "INFO done",
        ]
    )


@pytest.fixture
def cli_env():
    # plain output for stable assertions
    return {"NO_COLOR": "1", "TERM": "dumb", "COLUMNS": "200"}
