"""
Reconcile — Component matching across installed and target kits (pure).

Two components are the same logical unit when their names match, except
for the toolchain profile: its display name may change between manifest
revisions, so it is matched by kind alone.
"""

from __future__ import annotations

from collections.abc import Iterable

from kitmanager.core.models.component import Component, RestrictedSource


def same_component(a: Component, b: Component) -> bool:
    """Whether ``a`` and ``b`` describe the same logical unit."""
    if a.is_toolchain_profile or b.is_toolchain_profile:
        return a.kind is b.kind
    return a.name == b.name


def find_counterpart(
    component: Component,
    candidates: Iterable[Component],
) -> Component | None:
    """First candidate matching ``component``, or None."""
    for candidate in candidates:
        if same_component(component, candidate):
            return candidate
    return None


def is_restricted(component: Component) -> bool:
    """Whether the component needs a package source chosen before use."""
    return isinstance(component.tool_installer, RestrictedSource)
