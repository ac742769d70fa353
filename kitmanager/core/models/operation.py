"""
Operation — the single mode a manager session runs in.
"""

from __future__ import annotations

from enum import StrEnum


class Operation(StrEnum):
    """Mutually exclusive session modes."""

    MODIFY = "modify"                        # change selection within the installed kit
    UPDATE = "update"                        # move toward a newer kit
    UNINSTALL_TOOLKIT = "uninstall-toolkit"  # remove the toolkit, keep the manager
    UNINSTALL_ALL = "uninstall-all"          # remove the toolkit and the manager
