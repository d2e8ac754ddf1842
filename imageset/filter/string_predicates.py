# imageset/filter/string_predicates.py
import re
from typing import Optional, Pattern

from ..core.base_predicate import LiteralPredicate
from ..core.errors import BadExpressionError
from ..core.registry import register_predicate


@register_predicate("contain")
class ContainsPredicate(LiteralPredicate):
    """Passes strings that contain the literal."""

    def eval_literal(self, candidate: str, literal: str) -> bool:
        return literal in candidate


@register_predicate("containregexp")
class ContainsRegexpPredicate(LiteralPredicate):
    """Passes strings in which the literal regular expression finds a match."""

    def __init__(self):
        super().__init__()
        self._pattern: Optional[Pattern[str]] = None

    def _prepare(self, literal: str) -> None:
        try:
            self._pattern = re.compile(literal)
        except re.error as e:
            raise BadExpressionError(
                f"Invalid regular expression for '{self.symbol}': {literal!r} ({e})"
            ) from e

    def eval_literal(self, candidate: str, literal: str) -> bool:
        if self._pattern is not None and literal == self.literal:
            pattern = self._pattern
        else:
            pattern = re.compile(literal)
        return pattern.search(candidate) is not None


@register_predicate("startwith")
class StartsWithPredicate(LiteralPredicate):
    def eval_literal(self, candidate: str, literal: str) -> bool:
        return candidate.startswith(literal)


@register_predicate("endwith")
class EndsWithPredicate(LiteralPredicate):
    def eval_literal(self, candidate: str, literal: str) -> bool:
        return candidate.endswith(literal)


@register_predicate("eq")
class EqualsPredicate(LiteralPredicate):
    def eval_literal(self, candidate: str, literal: str) -> bool:
        return candidate == literal
