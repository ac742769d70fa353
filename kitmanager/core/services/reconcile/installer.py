"""
Reconcile — Fresh-install projection of the component list (pure).

Used before anything is installed: there is no installed kit to diff
against, so defaults come from each component's own flags.
"""

from __future__ import annotations

from collections.abc import Iterable

from kitmanager.core.models.check import CheckGroup, CheckItem
from kitmanager.core.models.component import Component
from kitmanager.core.services.reconcile.grouping import group_items
from kitmanager.core.services.reconcile.ordering import sort_components


def to_check_item(component: Component) -> CheckItem:
    """Required components are checked and locked, optional ones start unchecked."""
    return CheckItem(
        label=component.display_name,
        checked=component.required or not component.optional,
        required=component.required,
        disabled=component.required,
        value=component,
    )


def installer_items(components: Iterable[Component]) -> list[CheckItem]:
    return [to_check_item(c) for c in sort_components(components)]


def installer_groups(components: Iterable[Component]) -> list[CheckGroup]:
    """Sorted, grouped check items for a fresh installation."""
    return group_items(installer_items(components))
