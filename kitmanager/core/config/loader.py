"""
Snapshot loader — reads kits.yml into domain models.

A snapshot is what the backend would report: the installed kit, the
available kits, the installer component list and the default
configuration. It reads YAML (JSON is valid YAML too), validates against
Pydantic schemas, and returns typed domain objects.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kitmanager.core.models.component import Component
from kitmanager.core.models.config import BaseConfig
from kitmanager.core.models.kit import Kit

logger = logging.getLogger(__name__)

# Default snapshot filename
SNAPSHOT_FILE = "kits.yml"


class ConfigError(Exception):
    """Raised when a snapshot file is invalid or missing."""


class Snapshot(BaseModel):
    """Everything the backend reports, loaded at once."""

    model_config = ConfigDict(frozen=True)

    installed: Kit | None = None
    available: list[Kit] = Field(default_factory=list)
    components: list[Component] = Field(default_factory=list)
    configuration: BaseConfig = Field(default_factory=BaseConfig)


def find_snapshot_file(start_dir: Path | None = None) -> Path | None:
    """Search for kits.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to kits.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SNAPSHOT_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_snapshot(path: Path | None = None) -> Snapshot:
    """Load and validate a snapshot file.

    Args:
        path: Explicit path to the snapshot. If None, searches upward.

    Returns:
        Validated Snapshot model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_snapshot_file()

    if path is None:
        raise ConfigError(f"No {SNAPSHOT_FILE} found. Specify one with --snapshot.")

    if not path.is_file():
        raise ConfigError(f"Snapshot file not found: {path}")

    logger.debug("Loading snapshot from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        snapshot = Snapshot.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid snapshot: {e}") from e

    logger.info(
        "Loaded snapshot with installed kit %s and %d available kits",
        snapshot.installed.version if snapshot.installed else "(none)",
        len(snapshot.available),
    )
    return snapshot
