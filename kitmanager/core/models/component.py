"""
Component model — a single installable unit reported by the backend.

Components arrive from the backend already parsed. They are immutable for
the lifetime of a session; a reload replaces them wholesale.

Backend payloads use camelCase keys (``displayName``, ``toolInstaller``,
``groupName``); both those and the snake_case field names are accepted.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    model_validator,
)
from pydantic.alias_generators import to_camel


class ComponentKind(StrEnum):
    """What kind of installable unit a component is."""

    TOOL = "Tool"
    TOOLCHAIN_COMPONENT = "ToolchainComponent"
    TOOLCHAIN_PROFILE = "ToolchainProfile"

    @property
    def is_from_toolchain(self) -> bool:
        """A toolchain component or the toolchain profile itself."""
        return self in (ComponentKind.TOOLCHAIN_COMPONENT, ComponentKind.TOOLCHAIN_PROFILE)


# ── Tool installer sources ──────────────────────────────────────


class _InstallerBase(BaseModel):
    """Fields shared by every tool installer source."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    required: bool = False
    optional: bool = False
    identifier: str | None = None
    display_name: str | None = None
    requires: list[str] = Field(default_factory=list)    # tools this one needs
    obsoletes: list[str] = Field(default_factory=list)   # tools it replaces
    conflicts: list[str] = Field(default_factory=list)   # tools it cannot coexist with


class RestrictedSource(_InstallerBase):
    """A tool whose package cannot be redistributed.

    The source stays unknown until the user supplies one. ``default`` is
    usually a link to the vendor's download page.
    """

    source_kind: Literal["restricted"] = Field("restricted", alias="source_kind")
    restricted: bool = True
    default: str | None = None
    source: str | None = None
    version: str | None = None


class GitSource(_InstallerBase):
    """A tool built from a git repository."""

    source_kind: Literal["git"] = Field("git", alias="source_kind")
    git: str
    branch: str | None = None
    tag: str | None = None
    rev: str | None = None


class UrlSource(_InstallerBase):
    """A tool downloaded from a URL."""

    source_kind: Literal["url"] = Field("url", alias="source_kind")
    url: str
    version: str | None = None
    filename: str | None = None


class PathSource(_InstallerBase):
    """A tool shipped as a local package."""

    source_kind: Literal["path"] = Field("path", alias="source_kind")
    path: str
    version: str | None = None


class VersionSource(_InstallerBase):
    """A tool pinned to a registry version."""

    source_kind: Literal["version"] = Field("version", alias="source_kind")
    version: str = Field("", validation_alias=AliasChoices("version", "ver"))

    @model_validator(mode="before")
    @classmethod
    def _from_bare_version(cls, data: Any) -> Any:
        # tool = "0.1.0"
        if isinstance(data, str):
            return {"version": data}
        return data


# Order matters for untagged payloads: a restricted tool may also carry a
# version, a url source may also carry a version, and so on.
_SOURCE_KEYS = ("restricted", "git", "url", "path", "version", "ver")
_TAG_FOR_KEY = {"ver": "version"}


def _installer_tag(value: Any) -> str | None:
    """Pick the installer variant for a payload or an existing model."""
    if isinstance(value, BaseModel):
        return getattr(value, "source_kind", None)
    if isinstance(value, str):
        return "version"
    if not isinstance(value, dict):
        return None
    if "source_kind" in value:
        return value["source_kind"]
    for key in _SOURCE_KEYS:
        if key in value:
            return _TAG_FOR_KEY.get(key, key)
    return None


ToolInstaller = Annotated[
    Union[
        Annotated[RestrictedSource, Tag("restricted")],
        Annotated[GitSource, Tag("git")],
        Annotated[UrlSource, Tag("url")],
        Annotated[PathSource, Tag("path")],
        Annotated[VersionSource, Tag("version")],
    ],
    Discriminator(_installer_tag),
]


def installer_version(info: ToolInstaller) -> str | None:
    """The version a tool installer source pins, if any.

    Git sources only pin a version through their ``tag``.
    """
    if isinstance(info, GitSource):
        return info.tag
    if isinstance(info, VersionSource):
        return info.version
    if isinstance(info, (RestrictedSource, UrlSource, PathSource)):
        return info.version
    raise TypeError(f"Unknown tool installer: {type(info).__name__}")


def is_cargo_tool(info: ToolInstaller) -> bool:
    """Whether the tool can be installed straight from a registry or git."""
    if isinstance(info, (GitSource, VersionSource)):
        return True
    if isinstance(info, (RestrictedSource, UrlSource, PathSource)):
        return False
    raise TypeError(f"Unknown tool installer: {type(info).__name__}")


# ── Component ───────────────────────────────────────────────────


class Component(BaseModel):
    """A single installable item within a kit.

    ``installed`` is only meaningful on the installed side of a diff.
    A missing or empty ``category`` is grouped under "Others".
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int | str = 0
    name: str
    display_name: str = ""
    category: str | None = Field(
        default=None,
        validation_alias=AliasChoices("category", "groupName", "group_name"),
    )
    version: str | None = None
    desc: str = ""
    required: bool = False
    optional: bool = False
    installed: bool = False
    kind: ComponentKind = ComponentKind.TOOL
    tool_installer: ToolInstaller | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_display_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not (data.get("display_name") or data.get("displayName")):
            data = {k: v for k, v in data.items() if k not in ("display_name", "displayName")}
            data["display_name"] = data.get("name", "")
        return data

    @property
    def is_toolchain_profile(self) -> bool:
        return self.kind is ComponentKind.TOOLCHAIN_PROFILE


class RestrictedComponent(BaseModel):
    """A restricted tool waiting for the user to choose its package source."""

    name: str
    label: str = ""
    source: str | None = None
    default: str | None = None
