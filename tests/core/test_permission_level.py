"""Tests for the ordered permission level."""

import pytest

from inventory_access.core.exceptions import InvalidPermissionLevelError, ValidationError
from inventory_access.core.value_objects import PermissionLevel, SHAREABLE_LEVELS


class TestPermissionLevelOrdering:

    def test_total_order(self):
        ordered = [
            PermissionLevel.NONE,
            PermissionLevel.VIEW,
            PermissionLevel.EDIT_ITEMS,
            PermissionLevel.EDIT_INVENTORY,
            PermissionLevel.ALL_ACCESS,
            PermissionLevel.OWNER,
        ]
        assert sorted(reversed(ordered)) == ordered
        for lower, higher in zip(ordered, ordered[1:]):
            assert lower < higher
            assert higher > lower
            assert lower <= higher
            assert higher >= lower

    def test_ordering_is_by_rank_not_alphabet(self):
        # Alphabetically "view" > "owner"
        assert PermissionLevel.VIEW < PermissionLevel.OWNER
        assert max(PermissionLevel.EDIT_ITEMS, PermissionLevel.ALL_ACCESS) == PermissionLevel.ALL_ACCESS

    def test_comparison_with_plain_string_is_unsupported(self):
        with pytest.raises(TypeError):
            PermissionLevel.VIEW < 5

    def test_value_and_str(self):
        assert PermissionLevel.EDIT_ITEMS.value == "edit_items"
        assert str(PermissionLevel.EDIT_ITEMS) == "edit_items"


class TestPermissionLevelParsing:

    @pytest.mark.parametrize("raw, expected", [
        ("view", PermissionLevel.VIEW),
        ("EDIT_ITEMS", PermissionLevel.EDIT_ITEMS),
        ("  edit_inventory ", PermissionLevel.EDIT_INVENTORY),
        ("edit", PermissionLevel.EDIT_ITEMS),
        ("Full", PermissionLevel.EDIT_INVENTORY),
        ("owner", PermissionLevel.OWNER),
    ])
    def test_parse(self, raw, expected):
        assert PermissionLevel.parse(raw) is expected

    def test_parse_passes_through_members(self):
        assert PermissionLevel.parse(PermissionLevel.VIEW) is PermissionLevel.VIEW

    @pytest.mark.parametrize("raw", ["admin", "", None, 3])
    def test_parse_rejects_unknown(self, raw):
        with pytest.raises(InvalidPermissionLevelError):
            PermissionLevel.parse(raw)

    def test_shareable_levels(self):
        assert SHAREABLE_LEVELS == [
            PermissionLevel.VIEW,
            PermissionLevel.EDIT_ITEMS,
            PermissionLevel.EDIT_INVENTORY,
        ]
        assert not PermissionLevel.NONE.is_shareable
        assert not PermissionLevel.OWNER.is_shareable

    @pytest.mark.parametrize("raw", ["none", "all_access", "owner", "bogus"])
    def test_parse_share_level_rejects_non_storable(self, raw):
        with pytest.raises(InvalidPermissionLevelError) as exc_info:
            PermissionLevel.parse_share_level(raw)
        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.details["allowed"] == ["view", "edit_items", "edit_inventory"]

    def test_parse_share_level_accepts_legacy_alias(self):
        assert PermissionLevel.parse_share_level("full") is PermissionLevel.EDIT_INVENTORY
