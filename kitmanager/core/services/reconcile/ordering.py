"""
Reconcile — Display ordering of component lists (pure).

Required components first, then display names compared with the
current locale's collation. The sort is stable. Ordering is a display
convenience and never affects checked/disabled state.
"""

from __future__ import annotations

import locale
from collections.abc import Iterable

from kitmanager.core.models.component import Component


def _sort_key(component: Component) -> tuple[bool, str]:
    return (not component.required, locale.strxfrm(component.display_name))


def sort_components(components: Iterable[Component]) -> list[Component]:
    """Return a new list ordered required-first, then by display name."""
    return sorted(components, key=_sort_key)
