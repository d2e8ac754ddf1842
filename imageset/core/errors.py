# imageset/core/errors.py
"""Exception types raised by the image set core."""


class ImageSetError(Exception):
    """Base class for all image set errors."""


class MalformedLocationError(ImageSetError):
    """Raised when a location's URL cannot be parsed."""


class UnreconstructableURLError(ImageSetError):
    """Raised when a truncated path cannot be reassembled into a URL."""


class BadExpressionError(ImageSetError):
    """Raised when a filter expression or predicate tree is malformed.

    Covers syntax errors in expression text as well as arity, type and
    literal/subpredicate misuse while assembling a predicate tree.
    """


class UnexpectedRootTypeError(ImageSetError):
    """Raised when an attached metadata document is not an OME document."""
