"""
Tests for the installer projection and selection helpers.
"""

import pytest

from kitmanager.core.models import Component, RestrictedComponent, RestrictedSource
from kitmanager.core.services.reconcile import (
    MissingSourceError,
    checked_components,
    fill_restricted_sources,
    installer_groups,
    map_items,
    restricted_components,
    set_checked,
    to_check_item,
)
from kitmanager.core.services.reconcile.selection import source_prompt


class TestInstallerProjection:
    def test_required_locked_and_checked(self):
        item = to_check_item(Component(name="cargo", required=True, optional=True))
        assert item.checked is True
        assert item.disabled is True
        assert item.required is True

    def test_optional_unchecked(self):
        item = to_check_item(Component(name="clippy", optional=True))
        assert item.checked is False
        assert item.disabled is False

    def test_plain_component_checked(self):
        item = to_check_item(Component(name="rust-analyzer"))
        assert item.checked is True
        assert item.disabled is False

    def test_label_is_display_name(self):
        item = to_check_item(Component(name="mingw", display_name="MinGW-w64", version="13"))
        assert item.label == "MinGW-w64"

    def test_groups_sorted_required_first(self):
        groups = installer_groups([
            Component(name="clippy", category="Rust", optional=True),
            Component(name="cargo", category="Rust", required=True),
            Component(name="analyzer", category="Rust"),
        ])
        assert len(groups) == 1
        assert [i.value.name for i in groups[0].items] == ["cargo", "analyzer", "clippy"]


class TestCheckedComponents:
    def test_collects_checked(self):
        groups = installer_groups([
            Component(name="a", required=True),
            Component(name="b", optional=True),
            Component(name="c", category="X"),
        ])
        assert [c.name for c in checked_components(groups)] == ["a", "c"]

    def test_set_checked(self):
        groups = installer_groups([Component(name="b", optional=True)])
        toggled = set_checked(groups, "b", True)
        assert [c.name for c in checked_components(toggled)] == ["b"]
        assert checked_components(groups) == []

    def test_set_checked_keeps_locked_items(self):
        groups = installer_groups([Component(name="a", required=True)])
        toggled = set_checked(groups, "a", False)
        assert [c.name for c in checked_components(toggled)] == ["a"]

    def test_map_items_does_not_mutate(self):
        groups = installer_groups([Component(name="a")])
        mapped = map_items(groups, lambda i: i.model_copy(update={"label": "renamed"}))
        assert mapped[0].items[0].label == "renamed"
        assert groups[0].items[0].label == "a"


class TestRestrictedComponents:
    def _vs(self, **installer) -> Component:
        return Component(
            name="vs-buildtools",
            tool_installer={"restricted": True, **installer},
        )

    def test_lists_only_restricted(self):
        comps = [self._vs(default="https://example.com/vs.exe"), Component(name="cargo")]
        result = restricted_components(comps)
        assert result == [
            RestrictedComponent(
                name="vs-buildtools",
                label=source_prompt("vs-buildtools"),
                source=None,
                default="https://example.com/vs.exe",
            )
        ]

    def test_uses_installer_display_name(self):
        result = restricted_components([self._vs(displayName="VS Build Tools")])
        assert result[0].name == "VS Build Tools"
        assert "VS Build Tools" in result[0].label

    def test_fill_from_answers(self):
        answers = [RestrictedComponent(name="vs-buildtools", source="/pkgs/vs.exe")]
        filled = fill_restricted_sources([self._vs(), Component(name="cargo")], answers)
        info = filled[0].tool_installer
        assert isinstance(info, RestrictedSource)
        assert info.source == "/pkgs/vs.exe"
        assert filled[1].name == "cargo"

    def test_fill_keeps_existing_source(self):
        filled = fill_restricted_sources([self._vs(source="/already/here.exe")], [])
        assert filled[0].tool_installer.source == "/already/here.exe"

    def test_fill_missing_raises(self):
        with pytest.raises(MissingSourceError) as exc:
            fill_restricted_sources([self._vs()], [RestrictedComponent(name="other", source="/x")])
        assert exc.value.name == "vs-buildtools"

    def test_fill_does_not_mutate_input(self):
        original = self._vs()
        fill_restricted_sources([original], [RestrictedComponent(name="vs-buildtools", source="/x")])
        assert original.tool_installer.source is None
