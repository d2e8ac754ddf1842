# imageset/core/base_predicate.py
"""
Base classes for filter predicates.

A filter expression compiles to a tree of predicates. Every predicate
declares the type of value it consumes (``input_type``) and, for predicates
with children, the type it hands down to them (``output_type``). Boolean
terminals hold a single literal and have no output type.

A predicate starts out under construction and becomes sealed once its
literal or its subpredicates are attached. Misuse while building the tree
raises BadExpressionError immediately, so a sealed tree never raises when
evaluated.
"""
from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Optional, Sequence

from .errors import BadExpressionError


def quote_literal(literal: str) -> str:
    escaped = literal.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _type_name(t: Optional[type]) -> str:
    return "boolean" if t is None else t.__name__


class FilterPredicate(ABC):
    """Node of a filter expression tree."""

    symbol: ClassVar[str] = ""
    input_type: type = object
    output_type: Optional[type] = None

    @classmethod
    def create(
        cls, context_type: type, param: Optional[str] = None, **options: Any
    ) -> "FilterPredicate":
        """
        Build a predicate for use where values of ``context_type`` are supplied.

        Args:
            context_type: Type handed down by the parent (or the candidate type)
            param: Optional bracketed parameter from the expression text
            **options: Engine options such as a metadata extractor

        Raises:
            BadExpressionError: If a parameter is given to a predicate
                that takes none
        """
        if param is not None:
            raise BadExpressionError(f"'{cls.symbol}' does not take a parameter")
        return cls()

    @property
    @abstractmethod
    def sealed(self) -> bool:
        """True once the predicate is ready for evaluation."""

    @abstractmethod
    def set_literal(self, literal: str) -> None:
        """Attach the literal used by a terminal predicate."""

    @abstractmethod
    def set_subpredicates(self, subpredicates: Sequence["FilterPredicate"]) -> None:
        """Attach the ordered children of a composite predicate."""

    @abstractmethod
    def eval(self, candidate: Any) -> bool:
        """
        Evaluate the candidate.

        Args:
            candidate: Value of ``input_type``

        Returns:
            True to pass, False to filter out
        """

    def accepts(self, supplied_type: Optional[type]) -> bool:
        """Whether this predicate can consume values of ``supplied_type``."""
        return supplied_type is not None and issubclass(supplied_type, self.input_type)

    def _check_unsealed(self) -> None:
        if self.sealed:
            raise BadExpressionError(f"'{self.symbol}' is already complete")

    def _check_sealed(self) -> None:
        if not self.sealed:
            raise BadExpressionError(f"'{self.symbol}' is incomplete")


class LiteralPredicate(FilterPredicate):
    """A terminal predicate that compares a string against a literal."""

    input_type = str
    output_type = None

    def __init__(self):
        self._literal: Optional[str] = None

    @property
    def sealed(self) -> bool:
        return self._literal is not None

    @property
    def literal(self) -> Optional[str]:
        return self._literal

    def set_subpredicates(self, subpredicates: Sequence[FilterPredicate]) -> None:
        raise BadExpressionError(
            f"'{self.symbol}' uses a literal, not subpredicates"
        )

    def set_literal(self, literal: str) -> None:
        self._check_unsealed()
        if not isinstance(literal, str):
            raise BadExpressionError(
                f"'{self.symbol}' needs a string literal, got {type(literal).__name__}"
            )
        self._prepare(literal)
        self._literal = literal

    def _prepare(self, literal: str) -> None:
        """Validate or precompile the literal before it is stored."""

    def eval(self, candidate: str) -> bool:
        self._check_sealed()
        return self.eval_literal(candidate, self._literal)

    @abstractmethod
    def eval_literal(self, candidate: str, literal: str) -> bool:
        """
        Compare the candidate against a literal.

        Args:
            candidate: The string to be evaluated
            literal: The literal used in the comparison

        Returns:
            True to pass, False to filter out
        """

    def __str__(self) -> str:
        literal = "?" if self._literal is None else quote_literal(self._literal)
        return f"{self.symbol} {literal}"


class CompositePredicate(FilterPredicate):
    """A predicate that evaluates its children, left to right."""

    min_subpredicates: ClassVar[int] = 1
    max_subpredicates: ClassVar[Optional[int]] = 1

    def __init__(self):
        self._subpredicates: Optional[List[FilterPredicate]] = None

    @property
    def sealed(self) -> bool:
        return self._subpredicates is not None

    @property
    def subpredicates(self) -> List[FilterPredicate]:
        return list(self._subpredicates or [])

    def set_literal(self, literal: str) -> None:
        raise BadExpressionError(
            f"'{self.symbol}' uses subpredicates, not a literal"
        )

    def set_subpredicates(self, subpredicates: Sequence[FilterPredicate]) -> None:
        self._check_unsealed()
        subpredicates = list(subpredicates)
        count = len(subpredicates)
        if count < self.min_subpredicates or (
            self.max_subpredicates is not None and count > self.max_subpredicates
        ):
            raise BadExpressionError(
                f"'{self.symbol}' takes {self._arity_text()}, got {count}"
            )
        for child in subpredicates:
            if not isinstance(child, FilterPredicate):
                raise BadExpressionError(
                    f"'{self.symbol}' got a non-predicate child: {child!r}"
                )
            if not child.accepts(self.output_type):
                raise BadExpressionError(
                    f"'{child.symbol}' consumes {_type_name(child.input_type)} but "
                    f"'{self.symbol}' supplies {_type_name(self.output_type)}"
                )
            if not child.sealed:
                raise BadExpressionError(
                    f"'{child.symbol}' under '{self.symbol}' is incomplete"
                )
        self._subpredicates = subpredicates

    def _arity_text(self) -> str:
        if self.max_subpredicates is None:
            return f"at least {self.min_subpredicates} subpredicate(s)"
        if self.max_subpredicates == self.min_subpredicates:
            return f"exactly {self.min_subpredicates} subpredicate(s)"
        return (
            f"{self.min_subpredicates} to {self.max_subpredicates} subpredicates"
        )

    def eval(self, candidate: Any) -> bool:
        self._check_sealed()
        return self._eval(candidate, self._subpredicates)

    @abstractmethod
    def _eval(self, candidate: Any, subpredicates: List[FilterPredicate]) -> bool:
        pass

    def _head(self) -> str:
        return self.symbol

    def __str__(self) -> str:
        children = self._subpredicates or []
        if len(children) == 1:
            return f"{self._head()} {children[0]}"
        return " ".join([self._head()] + [f"({child})" for child in children])


class GenericCompositePredicate(CompositePredicate):
    """A composite whose input and output types follow the context it is used in."""

    def __init__(self, value_type: type = object):
        super().__init__()
        self.input_type = value_type
        self.output_type = value_type

    @classmethod
    def create(
        cls, context_type: type, param: Optional[str] = None, **options: Any
    ) -> "FilterPredicate":
        if param is not None:
            raise BadExpressionError(f"'{cls.symbol}' does not take a parameter")
        return cls(context_type)
