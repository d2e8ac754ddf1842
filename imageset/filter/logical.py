# imageset/filter/logical.py
"""
Boolean composition of predicates.

The children of ``and`` and ``or`` run left to right and evaluation stops at
the first decisive result, so children after it are never evaluated.
"""
from typing import Any, List

from ..core.base_predicate import FilterPredicate, GenericCompositePredicate
from ..core.registry import register_predicate


@register_predicate("and")
class AndPredicate(GenericCompositePredicate):
    """Passes when every subpredicate passes."""

    max_subpredicates = None

    def _eval(self, candidate: Any, subpredicates: List[FilterPredicate]) -> bool:
        return all(child.eval(candidate) for child in subpredicates)


@register_predicate("or")
class OrPredicate(GenericCompositePredicate):
    """Passes when any subpredicate passes."""

    max_subpredicates = None

    def _eval(self, candidate: Any, subpredicates: List[FilterPredicate]) -> bool:
        return any(child.eval(candidate) for child in subpredicates)


@register_predicate("not")
class NotPredicate(GenericCompositePredicate):
    """Inverts its subpredicate."""

    def _eval(self, candidate: Any, subpredicates: List[FilterPredicate]) -> bool:
        return not subpredicates[0].eval(candidate)


@register_predicate("does")
class DoesPredicate(GenericCompositePredicate):
    """Passes the value through to its subpredicate, e.g. ``file does contain "x"``."""

    def _eval(self, candidate: Any, subpredicates: List[FilterPredicate]) -> bool:
        return subpredicates[0].eval(candidate)


@register_predicate("doesnot")
class DoesNotPredicate(GenericCompositePredicate):
    """Negates its subpredicate, e.g. ``file doesnot endwith ".txt"``."""

    def _eval(self, candidate: Any, subpredicates: List[FilterPredicate]) -> bool:
        return not subpredicates[0].eval(candidate)
