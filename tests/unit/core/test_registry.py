"""Unit tests for PatternRegistry."""

import pytest

from src.core.exceptions import DuplicatePatternError, InvalidPatternError, RegistryFrozenError
from src.core.registry import PatternCategory, PatternRegistry, Phase, get_registry, reset_registry

EXPECTED_ORDER = [
    "singleton", "factory", "strategy", "observer", "decorator",
    "adapter", "template", "command", "proxy", "iterator",
    "builder", "facade", "state", "chain", "visitor",
]


class TestRegister:
    """Tests for populating the registry."""

    def test_register_keeps_order(self, make_pattern):
        """Test entries are listed in registration order."""
        registry = PatternRegistry([make_pattern("b"), make_pattern("a"), make_pattern("c")])
        assert registry.ids() == ["b", "a", "c"]
        assert [e.id for e in registry.list_all()] == ["b", "a", "c"]

    def test_duplicate_id_raises(self, make_pattern):
        """Test two entries with the same id fail registration."""
        with pytest.raises(DuplicatePatternError) as exc_info:
            PatternRegistry([make_pattern("a"), make_pattern("a")])
        assert exc_info.value.pattern_id == "a"

    def test_failed_register_stores_nothing(self, make_pattern):
        """Test a failed registration leaves the registry empty."""
        registry = PatternRegistry()
        with pytest.raises(DuplicatePatternError):
            registry.register([make_pattern("a"), make_pattern("b"), make_pattern("a")])
        assert len(registry) == 0
        assert registry.frozen is False

    def test_second_register_raises(self, make_pattern):
        """Test the registry is read-only once populated."""
        registry = PatternRegistry([make_pattern("a")])
        with pytest.raises(RegistryFrozenError):
            registry.register([make_pattern("b")])
        assert registry.ids() == ["a"]

    def test_uppercase_id_rejected(self, make_pattern):
        """Test ids must be lowercase."""
        with pytest.raises(InvalidPatternError):
            PatternRegistry([make_pattern("Mixed")])

    def test_empty_id_rejected(self, make_pattern):
        """Test ids must not be empty."""
        with pytest.raises(InvalidPatternError):
            PatternRegistry([make_pattern(" ", name="Blank")])


class TestLookup:
    """Tests for get and membership."""

    def test_get_is_case_insensitive(self, registry):
        """Test lookup ignores case."""
        assert registry.get("Singleton") is registry.get("singleton")
        assert registry.get("SINGLETON").name == "Singleton"

    def test_get_unknown_returns_none(self, registry):
        """Test unknown ids return None rather than raising."""
        assert registry.get("doesnotexist") is None

    def test_contains(self, registry):
        """Test membership is case-insensitive."""
        assert "Strategy" in registry
        assert "bogus" not in registry
        assert 42 not in registry

    def test_operation_by_phase(self, registry):
        """Test operation() returns the matching callable."""
        entry = registry.get("strategy")
        assert entry.operation(Phase.BEFORE) is entry.before
        assert entry.operation("after") is entry.after


class TestCatalog:
    """Tests for the built-in catalog."""

    def test_fifteen_patterns_in_order(self, registry):
        """Test the catalog registers the 15 patterns in menu order."""
        assert len(registry) == 15
        assert registry.ids() == EXPECTED_ORDER

    def test_iteration_matches_list_all(self, registry):
        """Test iterating yields the same entries as list_all."""
        assert list(registry) == registry.list_all()

    def test_group_by_category_partitions_entries(self, registry):
        """Test grouping loses and duplicates nothing."""
        grouped = registry.group_by_category()
        grouped_ids = [e.id for entries in grouped.values() for e in entries]
        assert sorted(grouped_ids) == sorted(EXPECTED_ORDER)
        assert len(grouped_ids) == len(set(grouped_ids))

    def test_group_by_category_order(self, registry):
        """Test categories appear in first-registration order."""
        grouped = registry.group_by_category()
        assert list(grouped) == [
            PatternCategory.CREATIONAL,
            PatternCategory.BEHAVIORAL,
            PatternCategory.STRUCTURAL,
        ]
        assert [e.id for e in grouped[PatternCategory.CREATIONAL]] == ["singleton", "factory", "builder"]
        assert [e.id for e in grouped[PatternCategory.STRUCTURAL]] == ["decorator", "adapter", "proxy", "facade"]


class TestGetRegistry:
    """Tests for the registry singleton."""

    def test_returns_same_instance(self):
        """Test get_registry returns a singleton."""
        assert get_registry() is get_registry()

    def test_reset_creates_new_instance(self):
        """Test reset_registry drops the singleton."""
        first = get_registry()
        reset_registry()
        assert get_registry() is not first

    def test_singleton_is_frozen(self, make_pattern):
        """Test the process-wide registry is read-only."""
        with pytest.raises(RegistryFrozenError):
            get_registry().register([make_pattern("extra")])
