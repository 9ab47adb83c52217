"""Centralized path management for the nestkeeper project.

All configuration files live under a single project root so that the CLI
and library callers resolve the same files regardless of where they run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Determine the project root directory."""
    env_root = os.environ.get("NESTKEEPER_HOME")
    if env_root:
        return Path(env_root).expanduser()
    return Path.cwd()


@dataclass
class ProjectPaths:
    """Container for all project-related paths."""

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def settings(self) -> Path:
        """Extraction/matching settings TOML file."""
        return self.config / "settings.toml"

    @property
    def retailer_rules(self) -> Path:
        """Extra known-retailer keywords TOML file."""
        return self.config / "retailers.toml"


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Drop the cached ProjectPaths so the next call re-reads NESTKEEPER_HOME."""
    global _paths
    _paths = None
