"""
Metadata extraction for image sets.

This module provides extractors that derive named metadata values from
image files and image planes. The values feed downstream set assembly,
which matches the reserved keys (FileLocation, Series, Frame) by name.

Key components:
- extractor: Combine several extractors into one
- extractors: URL/series/frame and file name/path name extractors
"""
from .extractor import CombinedMetadataExtractor
from .extractors import (
    FILE_NAME_TAG,
    INDEX_TAG,
    PATH_NAME_TAG,
    SERIES_TAG,
    URL_TAG,
    FileNamePathNameMetadataExtractor,
    URLSeriesIndexMetadataExtractor,
)

__all__ = [
    "CombinedMetadataExtractor",
    "FileNamePathNameMetadataExtractor",
    "URLSeriesIndexMetadataExtractor",
    "FILE_NAME_TAG",
    "INDEX_TAG",
    "PATH_NAME_TAG",
    "SERIES_TAG",
    "URL_TAG",
]
