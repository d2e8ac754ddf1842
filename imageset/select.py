# imageset/select.py
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sized, Tuple

from tqdm import tqdm

from .core.base_extractor import MetadataExtractor
from .core.image_file import ImageFile
from .core.image_plane import ImagePlane
from .core.string_cache import StringCache
from .filter import Filter
from .metadata import (
    CombinedMetadataExtractor,
    FileNamePathNameMetadataExtractor,
    URLSeriesIndexMetadataExtractor,
)

logger = logging.getLogger(__name__)


@dataclass
class SelectionResult:
    """Metadata rows of the candidates that passed a filter."""

    metadata_keys: Tuple[str, ...]
    rows: List[Dict[str, str]] = field(default_factory=list)
    n_seen: int = 0

    @property
    def n_selected(self) -> int:
        return len(self.rows)


def planes_for(
    image_file: ImageFile, n_series: int = 1, n_frames: int = 1
) -> Iterator[ImagePlane]:
    """Enumerate every (series, frame) plane of ``image_file``."""
    if n_series < 1 or n_frames < 1:
        raise ValueError(
            f"Series and frame counts must be positive, got {n_series}, {n_frames}"
        )
    for series in range(n_series):
        for index in range(n_frames):
            yield ImagePlane(image_file, series, index)


def default_extractor(
    candidate_type: type, string_cache: Optional[StringCache] = None
) -> MetadataExtractor:
    """The extractor used for a candidate type when none is given."""
    if string_cache is None:
        string_cache = StringCache()
    if issubclass(candidate_type, ImagePlane):
        return CombinedMetadataExtractor(
            [
                URLSeriesIndexMetadataExtractor(string_cache),
                FileNamePathNameMetadataExtractor(string_cache),
            ]
        )
    return FileNamePathNameMetadataExtractor(string_cache)


def select_candidates(
    expression: str,
    candidates: Iterable[Any],
    extractor: Optional[MetadataExtractor] = None,
    candidate_type: type = ImagePlane,
    show_progress: bool = True,
    string_cache: Optional[StringCache] = None,
) -> SelectionResult:
    """
    Filter candidates and extract metadata for the ones that pass.

    Args:
        expression: Filter expression text
        candidates: ImagePlane or ImageFile objects
        extractor: Metadata extractor; chosen from ``candidate_type`` if None
        candidate_type: Type of the candidates
        show_progress: Display a progress bar
        string_cache: Interner shared by the default extractors

    Returns:
        SelectionResult with one metadata row per accepted candidate

    Raises:
        BadExpressionError: If the expression cannot be compiled
    """
    if extractor is None:
        extractor = default_extractor(candidate_type, string_cache)
    candidate_filter = Filter(expression, candidate_type, extractor=extractor)
    logger.info(f"Filtering with: {candidate_filter.predicate}")

    result = SelectionResult(metadata_keys=extractor.get_metadata_keys())
    total = len(candidates) if isinstance(candidates, Sized) else None
    with tqdm(
        total=total,
        desc="Filtering candidates",
        unit="candidate",
        disable=not show_progress,
    ) as pbar:
        for candidate in candidates:
            result.n_seen += 1
            if not isinstance(candidate, candidate_type):
                logger.warning(
                    f"Skipping {candidate!r}: expected {candidate_type.__name__}"
                )
            elif candidate_filter.eval(candidate):
                result.rows.append(extractor.extract(candidate))
            pbar.update(1)

    logger.info(f"Selected {result.n_selected} of {result.n_seen} candidates")
    return result
