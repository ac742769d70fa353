"""
Reconcile use case — load a snapshot, pick the target kit, run the engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from kitmanager.core.backend import SnapshotBackend
from kitmanager.core.config.loader import ConfigError, load_snapshot
from kitmanager.core.models.check import CheckGroup
from kitmanager.core.models.component import Component, RestrictedComponent
from kitmanager.core.models.config import BaseConfig
from kitmanager.core.models.operation import Operation
from kitmanager.core.services.reconcile import (
    KitManager,
    installer_groups,
    removed_components,
    restricted_components,
)

logger = logging.getLogger(__name__)


@dataclass
class ReconcileResult:
    """Engine output for one snapshot and operation."""

    operation: Operation = Operation.UPDATE
    installed_version: str | None = None
    target_version: str | None = None
    uninstalling: bool = False
    groups: list[CheckGroup] = field(default_factory=list)
    removed: list[Component] = field(default_factory=list)
    restricted: list[RestrictedComponent] = field(default_factory=list)
    config: BaseConfig | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        if self.error:
            return {"error": self.error}

        result: dict = {
            "operation": str(self.operation),
            "installed_version": self.installed_version,
            "target_version": self.target_version,
            "uninstalling": self.uninstalling,
            "groups": [
                {
                    "label": g.label,
                    "items": [
                        {
                            "name": i.value.name,
                            "label": i.label,
                            "checked": i.checked,
                            "required": i.required,
                            "disabled": i.disabled,
                        }
                        for i in g.items
                    ],
                }
                for g in self.groups
            ],
            "removed": [
                {"name": c.name, "version": c.version} for c in self.removed
            ],
            "restricted": [r.model_dump() for r in self.restricted],
        }
        if self.config is not None:
            result["config"] = self.config.model_dump(mode="json")
        return result


def _load_manager(snapshot_path: Path | None) -> tuple[KitManager, list[Component]]:
    snapshot = load_snapshot(snapshot_path)
    backend = SnapshotBackend(snapshot)
    manager = KitManager()
    manager.load(backend)
    return manager, backend.get_component_list()


def _select_target(manager: KitManager, operation: Operation, version: str | None) -> None:
    """Point the manager's current kit at the requested target.

    ``update`` without an explicit version takes the first available kit.
    Every other mode keeps the installed kit as current.
    """
    if version is not None:
        kit = manager.find_kit(version)
        if kit is None:
            raise ConfigError(f"No toolkit with version '{version}' available")
        manager.set_current(kit)
    elif operation is Operation.UPDATE and manager.state.kits:
        manager.set_current(manager.state.kits[0])


def reconcile(
    operation: Operation = Operation.UPDATE,
    snapshot_path: Path | None = None,
    target_version: str | None = None,
) -> ReconcileResult:
    """Check groups, removals and restricted tools for an operation.

    Args:
        operation: Session mode.
        snapshot_path: Snapshot file (default: search upward for kits.yml).
        target_version: Available kit to move toward.

    Returns:
        ReconcileResult, with ``error`` set instead of raising.
    """
    operation = Operation(operation)
    try:
        manager, _ = _load_manager(snapshot_path)
        manager.set_operation(operation)
        _select_target(manager, operation, target_version)
    except ConfigError as e:
        return ReconcileResult(operation=operation, error=str(e))

    state, groups = manager.view()
    target = state.current
    return ReconcileResult(
        operation=operation,
        installed_version=state.installed.version if state.installed else None,
        target_version=target.version if target else None,
        uninstalling=manager.is_uninstalling(),
        groups=groups,
        removed=removed_components(state.installed, target),
        restricted=restricted_components(target.components if target else []),
        config=state.config,
    )


def install_plan(snapshot_path: Path | None = None) -> ReconcileResult:
    """Fresh-install projection of the backend's component list."""
    try:
        manager, components = _load_manager(snapshot_path)
    except ConfigError as e:
        return ReconcileResult(error=str(e))

    logger.debug("Projecting %d components for installation", len(components))
    return ReconcileResult(
        groups=installer_groups(components),
        restricted=restricted_components(components),
        config=manager.state.config,
    )
