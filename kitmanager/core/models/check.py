"""
CheckItem / CheckGroup — the checkbox-ready projection of components.

These are derived views. They are regenerated whenever the installed kit,
the current kit or the operation changes, and are never the source of truth.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from kitmanager.core.models.component import Component


class VersionLabel(BaseModel):
    """Rendering metadata for a version-annotated label."""

    model_config = ConfigDict(frozen=True)

    label: str
    old_version: str | None = None
    new_version: str | None = None


class CheckItem(BaseModel):
    """One checkbox wrapping a component."""

    model_config = ConfigDict(frozen=True)

    label: str
    checked: bool = False
    required: bool = False
    disabled: bool = False
    focused: bool = False
    value: Component
    label_props: VersionLabel | None = None


class CheckGroup(BaseModel):
    """Checkboxes sharing a category."""

    model_config = ConfigDict(frozen=True)

    label: str
    items: list[CheckItem]

    @property
    def components(self) -> list[Component]:
        return [item.value for item in self.items]
