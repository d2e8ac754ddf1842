# imageset/core/base_extractor.py
from abc import ABC, abstractmethod
from typing import Dict, Generic, Tuple, TypeVar

T = TypeVar("T")


class MetadataExtractor(ABC, Generic[T]):
    """
    Derives named metadata values from a candidate.

    Each extractor declares a fixed, ordered tuple of key names. The order is
    the column order used when reporting, and ``extract`` must return a
    mapping with exactly those keys.
    """

    @abstractmethod
    def get_metadata_keys(self) -> Tuple[str, ...]:
        """Return the ordered metadata keys this extractor produces."""
        pass

    @abstractmethod
    def extract(self, source: T) -> Dict[str, str]:
        """
        Extract metadata from a candidate.

        Args:
            source: The candidate, e.g. an ImagePlane

        Returns:
            Mapping of every metadata key to its value for ``source``
        """
        pass

    @property
    def metadata_keys(self) -> Tuple[str, ...]:
        return self.get_metadata_keys()
