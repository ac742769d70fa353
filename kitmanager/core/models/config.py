"""
BaseConfig — the default installation configuration reported by the backend.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# (value, enforced) — an enforced option cannot be changed by the user
EnforceableOption = tuple[str, bool]


class BaseConfig(BaseModel):
    """Install path, proxy/insecure flags and package-source overrides.

    The source overrides dictate where packages are fetched from. They are
    only editable when ``allow_source_config`` is set, which is the case for
    natively distributed toolkits.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    path: str = ""
    add_to_path: bool = False
    insecure: bool = False
    allow_source_config: bool = False

    # ── Package-source overrides ────────────────────────────────
    dist_server: EnforceableOption | None = None
    update_root: EnforceableOption | None = None
    registry_name: EnforceableOption | None = None
    registry_value: EnforceableOption | None = None

    def source_overrides(self) -> dict[str, EnforceableOption]:
        """The package-source overrides that are actually set."""
        overrides = {
            "dist_server": self.dist_server,
            "update_root": self.update_root,
            "registry_name": self.registry_name,
            "registry_value": self.registry_value,
        }
        return {k: v for k, v in overrides.items() if v is not None}
