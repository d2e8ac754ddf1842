"""
imageset - Select image files and planes with typed filter expressions.

This package derives metadata (URL, series, frame, file and path names)
from image files and the planes inside them, and evaluates filter
expressions that decide which candidates belong to an image set.
"""

# Import the filter package to trigger predicate registrations
from . import filter  # noqa: F401
from .core import (
    BadExpressionError,
    ImageFile,
    ImagePlane,
    MalformedLocationError,
    StringCache,
    UnexpectedRootTypeError,
    UnreconstructableURLError,
)
from .filter import Filter, evaluate
from .metadata import (
    CombinedMetadataExtractor,
    FileNamePathNameMetadataExtractor,
    URLSeriesIndexMetadataExtractor,
)
from .select import select_candidates

__version__ = "0.1.0"

# Expose main API
__all__ = [
    "__version__",
    "BadExpressionError",
    "CombinedMetadataExtractor",
    "FileNamePathNameMetadataExtractor",
    "Filter",
    "ImageFile",
    "ImagePlane",
    "MalformedLocationError",
    "StringCache",
    "URLSeriesIndexMetadataExtractor",
    "UnexpectedRootTypeError",
    "UnreconstructableURLError",
    "evaluate",
    "select_candidates",
]
