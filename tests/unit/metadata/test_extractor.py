# tests/unit/metadata/test_extractor.py
import pytest

from imageset.core.string_cache import StringCache
from imageset.metadata.extractor import CombinedMetadataExtractor
from imageset.metadata.extractors import (
    FileNamePathNameMetadataExtractor,
    URLSeriesIndexMetadataExtractor,
)


@pytest.fixture
def combined():
    cache = StringCache()
    return CombinedMetadataExtractor(
        [URLSeriesIndexMetadataExtractor(cache), FileNamePathNameMetadataExtractor(cache)]
    )


class TestCombinedMetadataExtractor:
    def test_keys_in_member_order(self, combined):
        assert combined.get_metadata_keys() == (
            "FileLocation", "Series", "Frame", "FileName", "PathName"
        )

    def test_extract_merges_members(self, combined, plane_a):
        result = combined.extract(plane_a)

        assert list(result) == list(combined.get_metadata_keys())
        assert result == {
            "FileLocation": "file:///a/b.tif",
            "Series": "0",
            "Frame": "5",
            "FileName": "b.tif",
            "PathName": "/a",
        }

    def test_duplicate_keys_rejected(self):
        with pytest.raises(ValueError, match="'FileName'"):
            CombinedMetadataExtractor(
                [FileNamePathNameMetadataExtractor(), FileNamePathNameMetadataExtractor()]
            )

    def test_no_members(self, plane_a):
        empty = CombinedMetadataExtractor([])
        assert empty.get_metadata_keys() == ()
        assert empty.extract(plane_a) == {}
