"""
Backend bridge — the calls the toolkit manager makes into its backend.

The real backend parses manifests, fetches packages and touches the
filesystem. Here it is only a shape: ``Backend`` names the calls, and
``SnapshotBackend`` answers them from a loaded snapshot file.
"""

from __future__ import annotations

from typing import Protocol

from kitmanager.core.config.loader import Snapshot
from kitmanager.core.models.component import Component, RestrictedComponent
from kitmanager.core.models.config import BaseConfig
from kitmanager.core.models.kit import Kit
from kitmanager.core.services.reconcile.selection import restricted_components


class Backend(Protocol):
    """Already-resolved answers from the backend."""

    def get_installed_kit(self) -> Kit | None: ...

    def get_available_kits(self) -> list[Kit]: ...

    def get_component_list(self) -> list[Component]: ...

    def get_restricted_components(
        self, selected: list[Component],
    ) -> list[RestrictedComponent]: ...

    def default_configuration(self) -> BaseConfig: ...


class SnapshotBackend:
    """A ``Backend`` served from a ``Snapshot``."""

    def __init__(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot

    def get_installed_kit(self) -> Kit | None:
        return self._snapshot.installed

    def get_available_kits(self) -> list[Kit]:
        return list(self._snapshot.available)

    def get_component_list(self) -> list[Component]:
        return list(self._snapshot.components)

    def get_restricted_components(
        self, selected: list[Component],
    ) -> list[RestrictedComponent]:
        return restricted_components(selected)

    def default_configuration(self) -> BaseConfig:
        return self._snapshot.configuration
