"""
Filter expressions over image files and image planes.

Importing this package registers the built-in predicates:

- string tests: contain, containregexp, startwith, endwith, eq
- composition: and, or, not, does, doesnot
- values: file, directory, extension, url, series, frame, metadata[Key]
"""
from . import location_predicates, logical, string_predicates  # noqa: F401
from .filter import Filter, compile_filter, evaluate
from .parser import parse_expression

__all__ = [
    "Filter",
    "compile_filter",
    "evaluate",
    "parse_expression",
]
