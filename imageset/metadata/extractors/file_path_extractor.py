# imageset/metadata/extractors/file_path_extractor.py
import logging
from typing import Dict, Optional, Tuple

from ...core.base_extractor import MetadataExtractor
from ...core.image_file import ImageLocation
from ...core.string_cache import StringCache

logger = logging.getLogger(__name__)

FILE_NAME_TAG = "FileName"
PATH_NAME_TAG = "PathName"


class FileNamePathNameMetadataExtractor(MetadataExtractor[ImageLocation]):
    """Extracts the file name and the folder / URL prefix of a location."""

    METADATA_KEYS: Tuple[str, ...] = (FILE_NAME_TAG, PATH_NAME_TAG)

    def __init__(self, string_cache: Optional[StringCache] = None):
        self.string_cache = string_cache if string_cache is not None else StringCache()

    def get_metadata_keys(self) -> Tuple[str, ...]:
        return self.METADATA_KEYS

    def extract(self, source: ImageLocation) -> Dict[str, str]:
        """
        Extract the file and path names of ``source``.

        A name that cannot be derived from the URL is reported as an empty
        string so that every key is present.
        """
        file_name = source.file_name
        path_name = source.path_name
        if file_name is None or path_name is None:
            logger.debug(f"Incomplete file/path metadata for {source.url}")
        return {
            FILE_NAME_TAG: self.string_cache.intern(file_name or ""),
            PATH_NAME_TAG: self.string_cache.intern(path_name or ""),
        }
