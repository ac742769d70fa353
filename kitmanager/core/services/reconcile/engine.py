"""
Reconcile — Turn kits and an operation into check groups (pure).

One projection per operation mode, picked from a dispatch table:

    modify             installed components, checked = installed
    update             target components diffed against the installed kit
    uninstall-*        the modify projection, all items disabled

No I/O, no mutation. Callers replace their derived groups wholesale
with whatever ``compute_check_groups`` returns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from kitmanager.core.models.check import CheckGroup, CheckItem, VersionLabel
from kitmanager.core.models.component import Component
from kitmanager.core.models.kit import Kit
from kitmanager.core.models.operation import Operation
from kitmanager.core.services.reconcile.grouping import group_items
from kitmanager.core.services.reconcile.matching import find_counterpart, is_restricted

logger = logging.getLogger(__name__)

NO_VERSION = "no version"


class VersionTransition(StrEnum):
    """How a target component relates to what is installed."""

    INSTALL = "install"            # required, not installed yet
    UPGRADE = "upgrade"            # installed with a different version
    UNCHANGED = "unchanged"        # installed with the same version
    OPTIONAL_NEW = "optional-new"  # not installed, user may opt in


_CHECKED_BY_DEFAULT = frozenset({VersionTransition.INSTALL, VersionTransition.UPGRADE})


# ── Labels ──────────────────────────────────────────────────────


def version_label(component: Component) -> str:
    """``"<display> (<version>)"``, or just the display name when unversioned."""
    if component.version is None:
        return component.display_name
    return f"{component.display_name} ({component.version})"


def transition_label(component: Component, old_version: str | None) -> str:
    """``"<display> (<old> -> <new>)"``."""
    old = old_version if old_version is not None else NO_VERSION
    new = component.version if component.version is not None else NO_VERSION
    return f"{component.display_name} ({old} -> {new})"


# ── Classification ──────────────────────────────────────────────


def on_disk(installed_kit: Kit | None) -> list[Component]:
    """Components of the installed kit that are actually installed.

    The installed kit lists everything the toolkit offers. Only the
    components flagged ``installed`` take part in diffs.
    """
    if installed_kit is None:
        return []
    return [c for c in installed_kit.components if c.installed]


def classify(
    component: Component,
    installed_kit: Kit | None,
) -> tuple[VersionTransition, Component | None]:
    """Classify a target component against the installed kit.

    Returns:
        The transition and the installed counterpart (None if absent).
    """
    counterpart = find_counterpart(component, on_disk(installed_kit))

    if counterpart is not None:
        if counterpart.version != component.version:
            return VersionTransition.UPGRADE, counterpart
        return VersionTransition.UNCHANGED, counterpart
    if component.required:
        return VersionTransition.INSTALL, None
    return VersionTransition.OPTIONAL_NEW, None


# ── Projections ─────────────────────────────────────────────────


def _modify_items(installed_kit: Kit | None, target_kit: Kit | None) -> list[CheckItem]:
    if installed_kit is None:
        return []
    return [
        CheckItem(
            label=version_label(comp),
            checked=comp.installed,
            required=comp.required,
            disabled=False,
            value=comp,
        )
        for comp in installed_kit.components
    ]


def _update_items(installed_kit: Kit | None, target_kit: Kit | None) -> list[CheckItem]:
    if target_kit is None:
        return []

    items: list[CheckItem] = []
    for comp in target_kit.components:
        # Restricted tools go through source selection, never auto-checked.
        if is_restricted(comp):
            continue

        transition, counterpart = classify(comp, installed_kit)
        old_version = counterpart.version if counterpart else None

        if transition is VersionTransition.UPGRADE:
            label = transition_label(comp, old_version)
        else:
            label = version_label(comp)

        items.append(
            CheckItem(
                label=label,
                checked=transition in _CHECKED_BY_DEFAULT,
                required=comp.required,
                disabled=False,
                value=comp,
                label_props=VersionLabel(
                    label=comp.display_name,
                    old_version=old_version,
                    new_version=comp.version,
                ),
            )
        )
    return items


def _uninstall_items(installed_kit: Kit | None, target_kit: Kit | None) -> list[CheckItem]:
    # The whole kit is targeted, per-item choices are display only.
    return [
        item.model_copy(update={"disabled": True})
        for item in _modify_items(installed_kit, target_kit)
    ]


_Projection = Callable[[Kit | None, Kit | None], list[CheckItem]]

_PROJECTIONS: dict[Operation, _Projection] = {
    Operation.MODIFY: _modify_items,
    Operation.UPDATE: _update_items,
    Operation.UNINSTALL_TOOLKIT: _uninstall_items,
    Operation.UNINSTALL_ALL: _uninstall_items,
}


# ── Public API ──────────────────────────────────────────────────


def is_uninstalling(operation: Operation) -> bool:
    """Whether the operation removes the toolkit as a whole."""
    return operation in (Operation.UNINSTALL_TOOLKIT, Operation.UNINSTALL_ALL)


def compute_check_items(
    operation: Operation,
    installed_kit: Kit | None,
    target_kit: Kit | None,
) -> list[CheckItem]:
    """Flat, ungrouped projection for an operation."""
    items = _PROJECTIONS[Operation(operation)](installed_kit, target_kit)
    logger.debug(
        "Projected %d items for %s (%d checked)",
        len(items), operation, sum(1 for i in items if i.checked),
    )
    return items


def compute_check_groups(
    operation: Operation,
    installed_kit: Kit | None,
    target_kit: Kit | None,
) -> list[CheckGroup]:
    """Grouped, checkbox-ready projection for an operation.

    Args:
        operation: Session mode, decides which projection runs.
        installed_kit: What exists on disk (None before anything is installed).
        target_kit: The kit to move toward (used by ``update``).

    Returns:
        A fresh list of groups. Nothing is shared with earlier calls.
    """
    return group_items(compute_check_items(operation, installed_kit, target_kit))


def removed_components(
    installed_kit: Kit | None,
    target_kit: Kit | None,
) -> list[Component]:
    """Installed components (``installed=True``) with no counterpart in the target kit.

    A separate pass: removals never show up in ``compute_check_groups``.
    """
    target = target_kit.components if target_kit else []
    return [c for c in on_disk(installed_kit) if find_counterpart(c, target) is None]
