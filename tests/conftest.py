"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from kitmanager.core.models import Component, ComponentKind, Kit


@pytest.fixture
def installed_kit() -> Kit:
    """An installed kit: toolchain profile, one component, two tools."""
    return Kit(
        name="Toolkit",
        version="1.0.0",
        components=[
            Component(
                id=0, name="rust", display_name="Rust (old)", version="1.79.0",
                kind=ComponentKind.TOOLCHAIN_PROFILE, required=True, installed=True,
                category="Toolchain",
            ),
            Component(
                id=1, name="rustfmt", version="1.79.0",
                kind=ComponentKind.TOOLCHAIN_COMPONENT, installed=True,
                category="Toolchain",
            ),
            Component(id=2, name="cargo-expand", version="1.0.80", installed=True),
            Component(id=3, name="mingw64", version="13.0", installed=False, category="Prerequisites"),
        ],
    )


@pytest.fixture
def target_kit() -> Kit:
    """A newer kit: bumps the toolchain, drops mingw64, adds new tools."""
    return Kit(
        name="Toolkit",
        version="1.1.0",
        components=[
            Component(
                id=0, name="rust-stable", display_name="Rust", version="1.80.0",
                kind=ComponentKind.TOOLCHAIN_PROFILE, required=True,
                category="Toolchain",
            ),
            Component(
                id=1, name="rustfmt", version="1.80.0",
                kind=ComponentKind.TOOLCHAIN_COMPONENT,
                category="Toolchain",
            ),
            Component(id=2, name="cargo-expand", version="1.0.80"),
            Component(id=3, name="cargo-nextest", version="0.9.70", required=True),
            Component(id=4, name="cargo-audit", version="0.20.0", optional=True, category=""),
            Component(
                id=5, name="vs-buildtools", version="17",
                tool_installer={"restricted": True, "default": "https://example.com/vs.exe"},
                category="Prerequisites",
            ),
        ],
    )


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    """A kits.yml with backend-style camelCase payloads."""
    content = textwrap.dedent("""\
        installed:
          name: Toolkit
          version: "1.0.0"
          manifestURL: https://example.com/1.0.0.toml
          components:
            - id: 0
              name: cargo
              displayName: cargo
              groupName: Rust
              version: "1.0"
              kind: Tool
              required: true
              installed: true
            - id: 1
              name: mingw64
              displayName: MinGW-w64
              groupName: Prerequisites
              version: "13.0"
              kind: Tool
              installed: true
        available:
          - name: Toolkit
            version: "1.1.0"
            components:
              - id: 0
                name: cargo
                displayName: cargo
                groupName: Rust
                version: "1.1"
                kind: Tool
                required: true
              - id: 1
                name: clippy
                displayName: clippy
                groupName: Rust
                version: "0.9"
                kind: Tool
              - id: 2
                name: vs-buildtools
                displayName: Visual Studio Build Tools
                groupName: Prerequisites
                kind: Tool
                toolInstaller:
                  restricted: true
                  default: https://example.com/vs_buildtools.exe
        components:
          - id: 0
            name: cargo
            displayName: cargo
            groupName: Rust
            required: true
          - id: 1
            name: clippy
            displayName: clippy
            groupName: Rust
            optional: true
          - id: 2
            name: rust-analyzer
            displayName: rust-analyzer
        configuration:
          path: /opt/toolkit
          addToPath: true
          insecure: false
          allowSourceConfig: true
          distServer: ["https://mirror.example.com", true]
    """)
    path = tmp_path / "kits.yml"
    path.write_text(content)
    return path
