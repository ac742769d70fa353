"""
Reconcile — Manager session state.

``ManagerState`` is an immutable snapshot of one session: the installed
kit, the current (target) kit, the available kits, the operation and the
components picked for it. The ``with_*`` functions are pure and return a
new state.

``KitManager`` owns a state together with the check groups derived from
it. Every setter swaps both in a single assignment, so a reader sees
either the old pair or the new one, never a mix.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from kitmanager.core.models.check import CheckGroup
from kitmanager.core.models.component import Component
from kitmanager.core.models.config import BaseConfig
from kitmanager.core.models.kit import Kit
from kitmanager.core.models.operation import Operation
from kitmanager.core.services.reconcile.engine import compute_check_groups, is_uninstalling
from kitmanager.core.services.reconcile.matching import is_restricted

if TYPE_CHECKING:
    from kitmanager.core.backend import Backend

logger = logging.getLogger(__name__)


class ManagerState(BaseModel):
    """One session's snapshots. Replaced, never mutated.

    ``components`` is the selection staged by the presentation layer for
    the pending operation (what the user confirmed, not what the kits
    contain). It is carried for that collaborator and does not feed
    ``derive_groups``.
    """

    model_config = ConfigDict(frozen=True)

    installed: Kit | None = None
    current: Kit | None = None
    kits: list[Kit] = Field(default_factory=list)
    operation: Operation = Operation.UPDATE
    components: list[Component] = Field(default_factory=list)
    config: BaseConfig = Field(default_factory=BaseConfig)


# ── Pure updates ────────────────────────────────────────────────


def with_installed(state: ManagerState, kit: Kit | None) -> ManagerState:
    return state.model_copy(update={"installed": kit})


def with_current(state: ManagerState, kit: Kit | None) -> ManagerState:
    return state.model_copy(update={"current": kit})


def with_kits(state: ManagerState, kits: list[Kit]) -> ManagerState:
    return state.model_copy(update={"kits": list(kits)})


def with_operation(state: ManagerState, operation: Operation) -> ManagerState:
    return state.model_copy(update={"operation": Operation(operation)})


def with_components(state: ManagerState, components: list[Component]) -> ManagerState:
    return state.model_copy(update={"components": list(components)})


def with_config(state: ManagerState, config: BaseConfig) -> ManagerState:
    return state.model_copy(update={"config": config})


def derive_groups(state: ManagerState) -> list[CheckGroup]:
    """Check groups for a state, computed from scratch."""
    return compute_check_groups(state.operation, state.installed, state.current)


# ── Owner ───────────────────────────────────────────────────────


class KitManager:
    """Holds the live state and its derived check groups."""

    def __init__(self, state: ManagerState | None = None) -> None:
        state = state or ManagerState()
        self._view: tuple[ManagerState, list[CheckGroup]] = (state, derive_groups(state))

    def _replace(self, state: ManagerState) -> None:
        self._view = (state, derive_groups(state))

    @property
    def state(self) -> ManagerState:
        return self._view[0]

    @property
    def groups(self) -> list[CheckGroup]:
        return self._view[1]

    def view(self) -> tuple[ManagerState, list[CheckGroup]]:
        """State and groups as one consistent pair."""
        return self._view

    # ── Setters ─────────────────────────────────────────────────

    def set_installed(self, kit: Kit | None) -> None:
        self._replace(with_installed(self.state, kit))

    def set_current(self, kit: Kit | None) -> None:
        self._replace(with_current(self.state, kit))

    def set_kits(self, kits: list[Kit]) -> None:
        self._replace(with_kits(self.state, kits))

    def set_operation(self, operation: Operation) -> None:
        self._replace(with_operation(self.state, operation))

    def set_components(self, components: list[Component]) -> None:
        self._replace(with_components(self.state, components))

    def set_config(self, config: BaseConfig) -> None:
        self._replace(with_config(self.state, config))

    # ── Queries ─────────────────────────────────────────────────

    def is_restricted(self, component: Component) -> bool:
        return is_restricted(component)

    def is_uninstalling(self) -> bool:
        return is_uninstalling(self.state.operation)

    def find_kit(self, version: str) -> Kit | None:
        """An available kit by version."""
        for kit in self.state.kits:
            if kit.version == version:
                return kit
        return None

    # ── Loading ─────────────────────────────────────────────────

    def load(self, backend: Backend) -> None:
        """Pull installed kit, available kits and default config.

        The installed kit also becomes the current kit until the caller
        picks an update target.
        """
        installed = backend.get_installed_kit()
        state = ManagerState(
            installed=installed,
            current=installed,
            kits=backend.get_available_kits(),
            operation=self.state.operation,
            config=backend.default_configuration(),
        )
        logger.info(
            "Loaded installed kit %s and %d available kits",
            installed.version if installed else "(none)", len(state.kits),
        )
        self._replace(state)
