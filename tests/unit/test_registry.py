"""
Tests for the predicate registry.
"""

import pytest

from imageset.core.base_predicate import LiteralPredicate
from imageset.core.errors import BadExpressionError
from imageset.core.registry import (
    _registry,
    available_symbols,
    get_predicate_class,
    register_predicate,
)
from imageset.filter.logical import AndPredicate
from imageset.filter.string_predicates import ContainsPredicate


class TestRegistry:
    """Test the registry functionality."""

    def setup_method(self):
        """Remember the registered predicates so tests can add their own."""
        with _registry._lock:
            self.original_predicates = _registry._predicates.copy()

    def teardown_method(self):
        """Restore original registry values after each test."""
        with _registry._lock:
            _registry._predicates.clear()
            _registry._predicates.update(self.original_predicates)

    def test_builtins_registered(self):
        expected = {
            "and", "or", "not", "does", "doesnot",
            "contain", "containregexp", "startwith", "endwith", "eq",
            "file", "directory", "extension", "url", "series", "frame", "metadata",
        }
        assert expected <= set(available_symbols())

    def test_lookup(self):
        assert get_predicate_class("contain") is ContainsPredicate
        assert get_predicate_class("and") is AndPredicate

    def test_register_sets_symbol(self):
        @register_predicate("isempty")
        class IsEmptyPredicate(LiteralPredicate):
            def eval_literal(self, candidate, literal):
                return candidate == ""

        assert IsEmptyPredicate.symbol == "isempty"
        assert get_predicate_class("isempty") is IsEmptyPredicate

    def test_reregistering_same_class_is_allowed(self):
        register_predicate("contain")(ContainsPredicate)
        assert get_predicate_class("contain") is ContainsPredicate

    def test_symbol_conflict(self):
        class OtherContains(LiteralPredicate):
            def eval_literal(self, candidate, literal):
                return False

        with pytest.raises(ValueError, match="already registered"):
            register_predicate("contain")(OtherContains)

    def test_unknown_symbol(self):
        with pytest.raises(BadExpressionError, match="Unknown predicate 'nope'"):
            get_predicate_class("nope")
