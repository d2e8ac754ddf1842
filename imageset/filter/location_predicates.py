# imageset/filter/location_predicates.py
import logging
from abc import abstractmethod
from pathlib import PurePosixPath
from typing import Any, List, Optional

from ..core.base_extractor import MetadataExtractor
from ..core.base_predicate import CompositePredicate, FilterPredicate
from ..core.errors import BadExpressionError
from ..core.image_file import ImageLocation
from ..core.image_plane import ImagePlane
from ..core.registry import register_predicate
from ..metadata.extractor import CombinedMetadataExtractor
from ..metadata.extractors import (
    FileNamePathNameMetadataExtractor,
    URLSeriesIndexMetadataExtractor,
)

logger = logging.getLogger(__name__)


class ValuePredicate(CompositePredicate):
    """
    Derives a string from the candidate and hands it to its subpredicate.

    A candidate whose value cannot be derived fails the filter without
    evaluating the subpredicate.
    """

    input_type = ImageLocation
    output_type = str

    def _eval(self, candidate: Any, subpredicates: List[FilterPredicate]) -> bool:
        value = self.get_value(candidate)
        if value is None:
            return False
        return subpredicates[0].eval(value)

    @abstractmethod
    def get_value(self, candidate: Any) -> Optional[str]:
        pass


@register_predicate("file")
class FileNamePredicate(ValuePredicate):
    def get_value(self, candidate: ImageLocation) -> Optional[str]:
        return candidate.file_name


@register_predicate("directory")
class DirectoryPredicate(ValuePredicate):
    def get_value(self, candidate: ImageLocation) -> Optional[str]:
        return candidate.path_name


@register_predicate("extension")
class ExtensionPredicate(ValuePredicate):
    """The lower-cased, possibly compound extension, e.g. ``ome.tif``."""

    def get_value(self, candidate: ImageLocation) -> Optional[str]:
        file_name = candidate.file_name
        if file_name is None:
            return None
        return "".join(PurePosixPath(file_name).suffixes)[1:].lower()


@register_predicate("url")
class URLPredicate(ValuePredicate):
    def get_value(self, candidate: ImageLocation) -> Optional[str]:
        return candidate.url


@register_predicate("series")
class SeriesPredicate(ValuePredicate):
    input_type = ImagePlane

    def get_value(self, candidate: ImagePlane) -> Optional[str]:
        return str(candidate.series)


@register_predicate("frame")
class FramePredicate(ValuePredicate):
    input_type = ImagePlane

    def get_value(self, candidate: ImagePlane) -> Optional[str]:
        return str(candidate.index)


@register_predicate("metadata")
class MetadataPredicate(ValuePredicate):
    """
    Looks up one metadata value, written ``metadata[Key]`` in expressions.

    Values come from a metadata extractor; the key must be one of the keys
    the extractor declares. Extractors report a value they could not derive
    as the empty string, so an empty value counts as missing.
    """

    input_type = ImagePlane

    def __init__(self, key: str, extractor: Optional[MetadataExtractor] = None):
        super().__init__()
        if extractor is None:
            extractor = CombinedMetadataExtractor(
                [URLSeriesIndexMetadataExtractor(), FileNamePathNameMetadataExtractor()]
            )
        if key not in extractor.get_metadata_keys():
            raise BadExpressionError(
                f"Unknown metadata key '{key}'. "
                f"Available: {list(extractor.get_metadata_keys())}"
            )
        self.key = key
        self.extractor = extractor

    @classmethod
    def create(
        cls, context_type: type, param: Optional[str] = None, **options: Any
    ) -> FilterPredicate:
        if not param:
            raise BadExpressionError(
                f"'{cls.symbol}' needs a key, e.g. {cls.symbol}[Series]"
            )
        return cls(param, extractor=options.get("extractor"))

    def get_value(self, candidate: ImagePlane) -> Optional[str]:
        value = self.extractor.extract(candidate).get(self.key)
        if not value:
            logger.debug(f"No '{self.key}' metadata for {candidate}")
            return None
        return value

    def _head(self) -> str:
        return f"{self.symbol}[{self.key}]"
