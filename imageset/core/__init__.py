"""
Core model of the image set filter: candidates, interning and base classes.
"""
from .base_extractor import MetadataExtractor
from .base_predicate import CompositePredicate, FilterPredicate, LiteralPredicate
from .errors import (
    BadExpressionError,
    ImageSetError,
    MalformedLocationError,
    UnexpectedRootTypeError,
    UnreconstructableURLError,
)
from .image_file import ImageFile, ImageLocation
from .image_plane import ImagePlane
from .string_cache import StringCache

__all__ = [
    "BadExpressionError",
    "CompositePredicate",
    "FilterPredicate",
    "ImageFile",
    "ImageLocation",
    "ImagePlane",
    "ImageSetError",
    "LiteralPredicate",
    "MalformedLocationError",
    "MetadataExtractor",
    "StringCache",
    "UnexpectedRootTypeError",
    "UnreconstructableURLError",
]
