from typing import Dict, Sequence, Tuple

from ..core.base_extractor import MetadataExtractor, T


class CombinedMetadataExtractor(MetadataExtractor[T]):
    """
    Runs several extractors over the same candidate and merges their output.
    """

    def __init__(self, extractors: Sequence[MetadataExtractor[T]]):
        """
        Initializes the CombinedMetadataExtractor.

        Args:
            extractors: Member extractors, in column order.

        Raises:
            ValueError: If two members produce the same metadata key.
        """
        self.extractors = tuple(extractors)
        keys = []
        for extractor in self.extractors:
            for key in extractor.get_metadata_keys():
                if key in keys:
                    raise ValueError(
                        f"Metadata key '{key}' is produced by more than one extractor"
                    )
                keys.append(key)
        self._metadata_keys = tuple(keys)

    def get_metadata_keys(self) -> Tuple[str, ...]:
        return self._metadata_keys

    def extract(self, source: T) -> Dict[str, str]:
        """
        Extracts metadata from every member extractor.

        Returns:
            A dictionary keyed in the order of ``get_metadata_keys()``.
        """
        result: Dict[str, str] = {}
        for extractor in self.extractors:
            result.update(extractor.extract(source))
        return result
