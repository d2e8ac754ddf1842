from .file_path_extractor import (
    FILE_NAME_TAG,
    PATH_NAME_TAG,
    FileNamePathNameMetadataExtractor,
)
from .url_series_index_extractor import (
    INDEX_TAG,
    SERIES_TAG,
    URL_TAG,
    URLSeriesIndexMetadataExtractor,
)

__all__ = [
    "FILE_NAME_TAG",
    "INDEX_TAG",
    "PATH_NAME_TAG",
    "SERIES_TAG",
    "URL_TAG",
    "FileNamePathNameMetadataExtractor",
    "URLSeriesIndexMetadataExtractor",
]
