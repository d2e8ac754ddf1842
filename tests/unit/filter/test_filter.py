# tests/unit/filter/test_filter.py
import pytest

from imageset.core.errors import BadExpressionError
from imageset.core.image_file import ImageFile
from imageset.core.image_plane import ImagePlane
from imageset.filter import Filter, compile_filter, evaluate
from imageset.metadata.extractors import URLSeriesIndexMetadataExtractor

EXPRESSION = 'and (series does eq "0") (url does contain "/a/")'


class TestFilter:
    """End-to-end compilation and evaluation."""

    def test_accepts_matching_plane(self, plane_a):
        assert Filter(EXPRESSION).eval(plane_a) is True

    def test_rejects_other_plane(self, plane_c):
        assert Filter(EXPRESSION).eval(plane_c) is False

    def test_metadata_form(self, plane_a, plane_c):
        candidate_filter = Filter(
            'and (metadata[Series] does eq "0") '
            '(metadata[FileLocation] does contain "/a/")'
        )
        assert candidate_filter(plane_a) is True
        assert candidate_filter(plane_c) is False

    def test_custom_extractor(self, plane_a):
        candidate_filter = Filter(
            'metadata[Frame] does eq "5"',
            extractor=URLSeriesIndexMetadataExtractor(),
        )
        assert candidate_filter.eval(plane_a) is True

        with pytest.raises(BadExpressionError, match="Unknown metadata key"):
            Filter(
                'metadata[FileName] does eq "b.tif"',
                extractor=URLSeriesIndexMetadataExtractor(),
            )

    def test_file_candidates(self):
        candidate_filter = Filter('extension does eq "tif"', ImageFile)
        assert candidate_filter.eval(ImageFile("file:///a/b.tif")) is True
        assert candidate_filter.eval(ImageFile("file:///a/b.png")) is False

    def test_malformed_location_evaluates_false(self):
        candidate_filter = Filter('file doesnot contain "zzz"')
        plane = ImagePlane(ImageFile("file:///a/b c.tif"))
        assert candidate_filter.eval(plane) is False

    def test_bad_expression(self):
        with pytest.raises(BadExpressionError):
            Filter("and")

    def test_repr(self):
        assert repr(Filter('file does eq "x"')) == "Filter('file does eq \"x\"', ImagePlane)"


class TestEvaluate:
    def setup_method(self):
        compile_filter.cache_clear()

    def test_evaluate(self, plane_a, plane_c):
        assert evaluate(EXPRESSION, plane_a) is True
        assert evaluate(EXPRESSION, plane_c) is False

    def test_compiled_filters_are_reused(self, plane_a, plane_c):
        evaluate(EXPRESSION, plane_a)
        evaluate(EXPRESSION, plane_c)

        info = compile_filter.cache_info()
        assert info.misses == 1
        assert info.hits == 1

    def test_candidate_type_from_candidate(self):
        assert evaluate('file does eq "b.tif"', ImageFile("file:///a/b.tif")) is True
        assert compile_filter.cache_info().currsize == 1

    def test_bad_expression_is_not_cached(self, plane_a):
        for _ in range(2):
            with pytest.raises(BadExpressionError):
                evaluate('file does eq "x" "y"', plane_a)
        assert compile_filter.cache_info().currsize == 0
