# imageset/filter/parser.py
"""
Compiles filter expression text into a sealed predicate tree.

Grammar::

    expression := symbol ["[" param "]"] (literal | operand+)
    operand    := "(" expression ")" | expression
    literal    := '"' characters '"'   (escapes: backslash-quote, backslash-backslash)

A bare expression following a symbol becomes its only child, so
``file does contain "x"`` nests as file -> does -> contain. Parentheses give
a predicate several children::

    and (file does startwith "A01") (series does eq "0")
"""
import re
from typing import Any, List, NamedTuple, Optional

from ..core.base_predicate import FilterPredicate
from ..core.errors import BadExpressionError
from ..core.registry import get_predicate_class

LPAREN = "lparen"
RPAREN = "rparen"
LITERAL = "literal"
SYMBOL = "symbol"

_TOKEN_RE = re.compile(
    r"""
    (?P<lparen>\()
    |(?P<rparen>\))
    |(?P<literal>"(?:[^"\\]|\\["\\]|\\(?=[^"\\]))*")
    |(?P<symbol>[A-Za-z_][A-Za-z0-9_\-]*)(?:\[(?P<param>[^\[\]\s"]+)\])?
    """,
    re.VERBOSE | re.DOTALL,
)
_ESCAPE_RE = re.compile(r'\\(["\\])')


class Token(NamedTuple):
    kind: str
    value: str
    position: int
    param: Optional[str] = None


def tokenize(text: str) -> List[Token]:
    """Split expression text into tokens."""
    tokens: List[Token] = []
    position = 0
    while position < len(text):
        if text[position].isspace():
            position += 1
            continue
        match = _TOKEN_RE.match(text, position)
        if match is None:
            if text[position] == '"':
                raise BadExpressionError(
                    f"Unterminated literal starting at position {position}"
                )
            raise BadExpressionError(
                f"Unexpected character {text[position]!r} at position {position}"
            )
        kind = match.lastgroup
        if kind == "param":
            kind = SYMBOL
        if kind == LITERAL:
            value = _ESCAPE_RE.sub(r"\1", match.group(LITERAL)[1:-1])
            tokens.append(Token(LITERAL, value, position))
        elif kind == SYMBOL:
            tokens.append(
                Token(SYMBOL, match.group(SYMBOL), position, match.group("param"))
            )
        else:
            tokens.append(Token(kind, match.group(kind), position))
        position = match.end()
    return tokens


class ExpressionParser:
    """Recursive descent parser over the token stream of one expression."""

    def __init__(self, text: str, **options: Any):
        """
        Args:
            text: The filter expression
            **options: Passed to every predicate's ``create``, e.g.
                ``extractor`` for ``metadata[Key]`` lookups
        """
        self.text = text
        self.options = options
        self._tokens = tokenize(text)
        self._index = 0

    def parse(self, candidate_type: type) -> FilterPredicate:
        if not self._tokens:
            raise BadExpressionError("Empty filter expression")
        root = self._parse_expression(candidate_type)
        extra = self._peek()
        if extra is not None:
            raise BadExpressionError(
                f"Unexpected {extra.value!r} at position {extra.position}"
            )
        if not root.accepts(candidate_type):
            raise BadExpressionError(
                f"'{root.symbol}' cannot be applied to {candidate_type.__name__} "
                f"candidates"
            )
        return root

    def _peek(self) -> Optional[Token]:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        self._index += 1
        return token

    def _parse_expression(self, context_type: type) -> FilterPredicate:
        token = self._peek()
        if token is None:
            raise BadExpressionError("Expression ended where a predicate was expected")
        if token.kind != SYMBOL:
            raise BadExpressionError(
                f"Expected a predicate at position {token.position}, "
                f"got {token.value!r}"
            )
        self._advance()
        predicate_class = get_predicate_class(token.value)
        try:
            predicate = predicate_class.create(context_type, token.param, **self.options)
        except BadExpressionError as e:
            raise BadExpressionError(f"{e} (at position {token.position})") from e

        following = self._peek()
        if following is not None and following.kind == LITERAL:
            self._advance()
            self._attach(predicate, token, literal=following.value)
            return predicate

        if predicate.output_type is None:
            raise BadExpressionError(
                f"'{token.value}' at position {token.position} expects a literal"
            )
        children = self._parse_operands(predicate.output_type)
        self._attach(predicate, token, children=children)
        return predicate

    def _parse_operands(self, context_type: type) -> List[FilterPredicate]:
        children: List[FilterPredicate] = []
        while True:
            token = self._peek()
            if token is None or token.kind == RPAREN:
                return children
            if token.kind == LPAREN:
                self._advance()
                children.append(self._parse_expression(context_type))
                closing = self._peek()
                if closing is None or closing.kind != RPAREN:
                    raise BadExpressionError(
                        f"Missing ')' for '(' at position {token.position}"
                    )
                self._advance()
            elif token.kind == SYMBOL:
                children.append(self._parse_expression(context_type))
            else:
                raise BadExpressionError(
                    f"Unexpected literal {token.value!r} at position {token.position}"
                )

    @staticmethod
    def _attach(
        predicate: FilterPredicate,
        token: Token,
        literal: Optional[str] = None,
        children: Optional[List[FilterPredicate]] = None,
    ) -> None:
        try:
            if children is None:
                predicate.set_literal(literal)
            else:
                predicate.set_subpredicates(children)
        except BadExpressionError as e:
            raise BadExpressionError(f"{e} (at position {token.position})") from e


def parse_expression(
    text: str, candidate_type: type, **options: Any
) -> FilterPredicate:
    """
    Compile ``text`` into a sealed predicate tree for ``candidate_type``.

    Raises:
        BadExpressionError: If the text is not a well formed, well typed
            expression
    """
    return ExpressionParser(text, **options).parse(candidate_type)
