"""
Reconcile — Selection helpers over check groups and restricted tools (pure).

Restricted tools cannot be redistributed, so the user has to point at a
package source before an operation may include them. These helpers list
what needs asking and fold the answers back into the selection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from kitmanager.core.models.check import CheckGroup, CheckItem
from kitmanager.core.models.component import (
    Component,
    RestrictedComponent,
    RestrictedSource,
)

logger = logging.getLogger(__name__)


class MissingSourceError(ValueError):
    """A selected restricted tool still has no package source."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool '{name}' still has no package source")


def checked_components(groups: Iterable[CheckGroup]) -> list[Component]:
    """Components of every checked item, in group order."""
    return [item.value for group in groups for item in group.items if item.checked]


def map_items(
    groups: Iterable[CheckGroup],
    fn: Callable[[CheckItem], CheckItem],
) -> list[CheckGroup]:
    """New groups with ``fn`` applied to every item."""
    return [
        group.model_copy(update={"items": [fn(item) for item in group.items]})
        for group in groups
    ]


def set_checked(groups: Iterable[CheckGroup], name: str, checked: bool) -> list[CheckGroup]:
    """Toggle one component by name. Disabled items keep their state."""
    def _toggle(item: CheckItem) -> CheckItem:
        if item.value.name != name or item.disabled:
            return item
        return item.model_copy(update={"checked": checked})

    return map_items(groups, _toggle)


def _restricted_name(component: Component, info: RestrictedSource) -> str:
    return info.display_name or component.name


def source_prompt(name: str) -> str:
    return f"Choose a package source for '{name}'"


def restricted_components(components: Iterable[Component]) -> list[RestrictedComponent]:
    """Restricted tools among ``components`` that need a source chosen."""
    result = []
    for comp in components:
        info = comp.tool_installer
        if not isinstance(info, RestrictedSource):
            continue
        name = _restricted_name(comp, info)
        result.append(
            RestrictedComponent(
                name=name,
                label=source_prompt(name),
                source=info.source,
                default=info.default,
            )
        )
    return result


def fill_restricted_sources(
    components: Iterable[Component],
    answers: Iterable[RestrictedComponent],
) -> list[Component]:
    """Copy user-chosen sources into the restricted tools of a selection.

    Answers are matched by the name reported in ``restricted_components``.
    An answer without a source falls back to the tool's existing source.

    Raises:
        MissingSourceError: If a restricted tool ends up with no source.
    """
    chosen = {a.name: a.source for a in answers if a.source}
    filled: list[Component] = []

    for comp in components:
        info = comp.tool_installer
        if not isinstance(info, RestrictedSource):
            filled.append(comp)
            continue

        name = _restricted_name(comp, info)
        source = chosen.get(name) or info.source
        if not source:
            raise MissingSourceError(name)

        logger.debug("Package source for %s: %s", name, source)
        filled.append(
            comp.model_copy(update={"tool_installer": info.model_copy(update={"source": source})})
        )

    return filled
