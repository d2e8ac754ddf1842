# imageset/filter/filter.py
import logging
from functools import lru_cache
from typing import Any, Optional

from ..core.base_extractor import MetadataExtractor
from ..core.image_plane import ImagePlane
from .parser import parse_expression

logger = logging.getLogger(__name__)


class Filter:
    """A compiled filter expression that accepts or rejects candidates."""

    def __init__(
        self,
        expression: str,
        candidate_type: type = ImagePlane,
        extractor: Optional[MetadataExtractor] = None,
    ):
        """
        Compile a filter expression.

        Args:
            expression: Filter text, e.g. ``file does endwith ".tif"``
            candidate_type: Type of the candidates that will be evaluated
            extractor: Extractor serving ``metadata[Key]`` lookups. The
                default reports FileLocation, Series, Frame, FileName and
                PathName.

        Raises:
            BadExpressionError: If the expression is malformed or does not
                apply to ``candidate_type``
        """
        self.expression = expression
        self.candidate_type = candidate_type
        options = {} if extractor is None else {"extractor": extractor}
        self.predicate = parse_expression(expression, candidate_type, **options)
        logger.debug(
            f"Compiled filter for {candidate_type.__name__}: {self.predicate}"
        )

    def eval(self, candidate: Any) -> bool:
        """Return True if the candidate passes the filter."""
        return self.predicate.eval(candidate)

    def __call__(self, candidate: Any) -> bool:
        return self.eval(candidate)

    def __repr__(self) -> str:
        return f"Filter({self.expression!r}, {self.candidate_type.__name__})"


@lru_cache(maxsize=256)
def compile_filter(expression: str, candidate_type: type = ImagePlane) -> Filter:
    """Compile ``expression``, reusing earlier compilations of the same text."""
    return Filter(expression, candidate_type)


def evaluate(
    expression: str, candidate: Any, candidate_type: Optional[type] = None
) -> bool:
    """
    Evaluate an expression against one candidate.

    Args:
        expression: Filter text
        candidate: An ImagePlane or ImageFile
        candidate_type: Type to compile for; defaults to the candidate's type

    Returns:
        True if the candidate passes
    """
    if candidate_type is None:
        candidate_type = type(candidate)
    return compile_filter(expression, candidate_type).eval(candidate)
