# PathResolver.py
"""
Path resolution for development and installed environments.

Environments:
- development: running from a source checkout; config/ and logs/ live next to
  the entry script
- installed: no config/ next to the entry script; XDG directories are used
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

DistributionMode = Literal["installed", "development"]

APP_NAME = "resource-browser"
CONFIG_NAME = "browser_config.json"


@dataclass(frozen=True)
class ResolvedPaths:
    """Immutable container for all resolved application paths."""
    app_dir: Path
    config_dir: Path
    logs_dir: Path
    environment: DistributionMode


class PathResolver:
    """Resolves application paths for the current environment."""

    def __init__(self, script_path: Path):
        self._script_path = script_path.resolve()
        self._mode = self._detect_distribution_mode()
        self._paths = self._resolve_paths()

    @property
    def paths(self) -> ResolvedPaths:
        """Returns resolved paths for current environment."""
        return self._paths

    @property
    def mode(self) -> DistributionMode:
        """Returns current distribution mode."""
        return self._mode

    def _detect_distribution_mode(self) -> DistributionMode:
        if (self._script_path.parent / "config").is_dir():
            return "development"
        return "installed"

    def _resolve_paths(self) -> ResolvedPaths:
        app_dir = self._script_path.parent

        if self._mode == "development":
            config_dir = app_dir / "config"
            logs_dir = app_dir / "logs"
        else:
            home = Path.home()
            config_home = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
            state_home = Path(os.environ.get("XDG_STATE_HOME") or home / ".local" / "state")
            config_dir = config_home / APP_NAME
            logs_dir = state_home / APP_NAME / "logs"

        return ResolvedPaths(
            app_dir=app_dir,
            config_dir=config_dir,
            logs_dir=logs_dir,
            environment=self._mode,
        )

    def get_config_path(self, config_name: str = CONFIG_NAME) -> Path:
        return self._paths.config_dir / config_name

    def ensure_local_dir_structure(self) -> None:
        """Ensures directories config and logs exist."""
        self._paths.config_dir.mkdir(parents=True, exist_ok=True)
        self._paths.logs_dir.mkdir(parents=True, exist_ok=True)
