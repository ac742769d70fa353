"""
Reconcile — Partition check items into category groups (pure).

Every item lands in exactly one group. Group order follows first
appearance but is not part of the contract.
"""

from __future__ import annotations

from collections.abc import Iterable

from kitmanager.core.models.check import CheckGroup, CheckItem

OTHERS_GROUP = "Others"


def group_label(item: CheckItem) -> str:
    """The group an item belongs to; "Others" when it has no category."""
    return item.value.category or OTHERS_GROUP


def group_items(items: Iterable[CheckItem]) -> list[CheckGroup]:
    """Partition items by component category.

    Items are copied with ``focused`` reset, the originals are untouched.
    """
    buckets: dict[str, list[CheckItem]] = {}
    for item in items:
        buckets.setdefault(group_label(item), []).append(
            item.model_copy(update={"focused": False})
        )
    return [CheckGroup(label=label, items=members) for label, members in buckets.items()]
