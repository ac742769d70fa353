"""
Domain models — Pydantic types for the toolkit manager.

All models are re-exported here for convenient access:

    from kitmanager.core.models import Component, Kit, CheckGroup, Operation
"""

from kitmanager.core.models.check import CheckGroup, CheckItem, VersionLabel
from kitmanager.core.models.component import (
    Component,
    ComponentKind,
    GitSource,
    PathSource,
    RestrictedComponent,
    RestrictedSource,
    ToolInstaller,
    UrlSource,
    VersionSource,
    installer_version,
    is_cargo_tool,
)
from kitmanager.core.models.config import BaseConfig, EnforceableOption
from kitmanager.core.models.kit import Kit, ToolkitKind
from kitmanager.core.models.operation import Operation

__all__ = [
    # config.py
    "BaseConfig",
    # check.py
    "CheckGroup",
    "CheckItem",
    # component.py
    "Component",
    "ComponentKind",
    "EnforceableOption",
    "GitSource",
    # kit.py
    "Kit",
    # operation.py
    "Operation",
    "PathSource",
    "RestrictedComponent",
    "RestrictedSource",
    "ToolInstaller",
    "ToolkitKind",
    "UrlSource",
    "VersionLabel",
    "VersionSource",
    "installer_version",
    "is_cargo_tool",
]
