"""Tests for catalog aggregation and the name ownership index."""

import pytest

from ghl_mcp.catalog import ToolRegistry, build_catalog, build_ownership_index
from ghl_mcp.errors import DuplicateToolNameError, OwnershipMismatchError, RegistryError

from conftest import FakeGroup


class TestBuildCatalog:
    """Aggregation order and uniqueness."""

    def test_registration_order_preserved(self, contact_group, messaging_group):
        """Group order first, then each group's internal order."""
        catalog = build_catalog([contact_group, messaging_group])
        assert catalog.names() == [
            "create_contact", "get_contact", "search_contacts",
            "send_sms", "send_email", "get_conversation",
        ]

    def test_reverse_registration_reverses_groups(self, contact_group, messaging_group):
        catalog = build_catalog([messaging_group, contact_group])
        assert catalog.names()[0] == "send_sms"
        assert catalog.names()[-1] == "search_contacts"

    def test_duplicate_across_groups_names_both(self):
        """Two groups claiming "x" abort construction."""
        a = FakeGroup("alpha", ["x", "y"])
        b = FakeGroup("beta", ["z", "x"])
        with pytest.raises(DuplicateToolNameError) as exc_info:
            build_catalog([a, b])
        err = exc_info.value
        assert err.name == "x"
        assert err.first_group == "alpha"
        assert err.second_group == "beta"
        assert "alpha" in str(err) and "beta" in str(err)

    def test_duplicate_is_registry_error(self):
        a = FakeGroup("alpha", ["x"])
        b = FakeGroup("beta", ["x"])
        with pytest.raises(RegistryError):
            ToolRegistry.from_groups([a, b])

    def test_catalog_lookup(self, contact_group):
        catalog = build_catalog([contact_group])
        assert len(catalog) == 3
        assert "get_contact" in catalog
        assert "send_sms" not in catalog
        assert catalog.get("get_contact").description == "The get_contact tool"
        assert catalog.get("missing") is None
        assert catalog[0].name == "create_contact"

    def test_to_list_uses_wire_keys(self, contact_group):
        entry = build_catalog([contact_group]).to_list()[0]
        assert set(entry) == {"name", "description", "inputSchema"}

    def test_empty_group_set(self):
        assert len(build_catalog([])) == 0


class TestOwnershipIndex:
    """Declared names vs published definitions."""

    def test_every_name_resolves_to_one_group(self, contact_group, messaging_group):
        index = build_ownership_index([contact_group, messaging_group])
        assert index["create_contact"] is contact_group
        assert index["send_sms"] is messaging_group
        assert len(index) == 6

    def test_index_is_read_only(self, contact_group):
        index = build_ownership_index([contact_group])
        with pytest.raises(TypeError):
            index["new_tool"] = contact_group

    def test_declared_but_unpublished(self):
        """A routable name with no definition is rejected."""
        group = FakeGroup("alpha", ["a"], declared=["a", "ghost"])
        with pytest.raises(OwnershipMismatchError) as exc_info:
            build_ownership_index([group])
        assert exc_info.value.group == "alpha"
        assert exc_info.value.unpublished == ["ghost"]
        assert exc_info.value.undeclared == []

    def test_published_but_undeclared(self):
        """A discoverable name no group routes is rejected."""
        group = FakeGroup("alpha", ["a", "orphan"], declared=["a"])
        with pytest.raises(OwnershipMismatchError) as exc_info:
            build_ownership_index([group])
        assert exc_info.value.undeclared == ["orphan"]
        assert "published but not routable" in str(exc_info.value)

    def test_duplicate_declaration(self):
        a = FakeGroup("alpha", ["x"])
        b = FakeGroup("beta", ["x"])
        with pytest.raises(DuplicateToolNameError):
            build_ownership_index([a, b])


class TestToolRegistry:
    def test_from_groups(self, registry, contact_group):
        assert registry.tool_count == 6
        assert len(registry.groups) == 2
        assert registry.owner_of("get_contact") is contact_group
        assert registry.owner_of("delete_contact_permanently") is None
