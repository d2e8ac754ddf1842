# imageset/metadata/extractors/url_series_index_extractor.py
from typing import Dict, Optional, Tuple

from ...core.base_extractor import MetadataExtractor
from ...core.image_plane import ImagePlane
from ...core.string_cache import StringCache

URL_TAG = "FileLocation"
SERIES_TAG = "Series"
INDEX_TAG = "Frame"

ZERO = "0"


class URLSeriesIndexMetadataExtractor(MetadataExtractor[ImagePlane]):
    """Adds an image plane's URL, series and frame index to its metadata."""

    METADATA_KEYS: Tuple[str, ...] = (URL_TAG, SERIES_TAG, INDEX_TAG)

    def __init__(self, string_cache: Optional[StringCache] = None):
        """
        Args:
            string_cache: Interner shared across the pipeline. A private cache
                is created if none is given.
        """
        self.string_cache = string_cache if string_cache is not None else StringCache()

    def get_metadata_keys(self) -> Tuple[str, ...]:
        return self.METADATA_KEYS

    def extract(self, source: ImagePlane) -> Dict[str, str]:
        return {
            URL_TAG: self.string_cache.intern(source.url),
            SERIES_TAG: self._number(source.series),
            INDEX_TAG: self._number(source.index),
        }

    def _number(self, value: int) -> str:
        # Most planes are series 0 / frame 0
        if value == 0:
            return ZERO
        return self.string_cache.intern(str(value))
