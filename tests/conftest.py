"""Pytest fixtures for sphere-tools tests."""

import pytest


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no user config and an empty project directory as cwd.

    A ``.git`` marker stops the project config search at ``tmp_path``.
    Returns the project directory.
    """
    (tmp_path / ".git").mkdir()
    monkeypatch.setattr("sphere_tools.config.USER_CONFIG_PATH", tmp_path / "no-user-config.toml")
    monkeypatch.delenv("SPHERE_TOOLS_ANGLE_UNITS", raising=False)
    monkeypatch.setattr("sphere_tools.units._current_formatter", None)
    monkeypatch.chdir(tmp_path)
    return tmp_path
