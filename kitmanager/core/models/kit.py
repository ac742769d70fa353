"""
Kit model — a named, versioned bundle of components.

Two kits are live at once: the installed kit (what exists on disk) and the
current kit (the candidate to modify toward). Kits are replaced wholesale
on reload, never patched.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from kitmanager.core.models.component import Component


class ToolkitKind(StrEnum):
    """How a toolkit is distributed."""

    BUILT_IN = "BuiltIn"   # name and sources fixed by the distributor
    NATIVE = "Native"      # servers and registries customizable by the user


class Kit(BaseModel):
    """An installed or available toolkit snapshot."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    version: str = ""
    name: str = ""
    desc: str = ""
    info: str = ""                # release notes
    manifest_url: str = Field("", alias="manifestURL")
    kind: ToolkitKind = ToolkitKind.BUILT_IN
    components: list[Component] = Field(default_factory=list)

    def get(self, name: str) -> Component | None:
        """Look up a component by exact name."""
        for comp in self.components:
            if comp.name == name:
                return comp
        return None
