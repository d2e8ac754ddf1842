# imageset/core/image_plane.py
from dataclasses import dataclass
from typing import Optional

from .image_file import ImageFile, ImageLocation


@dataclass(frozen=True)
class ImagePlane(ImageLocation):
    """A single plane (series + frame index) within a possibly multi-image file."""

    image_file: ImageFile
    series: int = 0
    index: int = 0

    def __post_init__(self):
        if self.series < 0:
            raise ValueError(f"Series must be non-negative, got {self.series}")
        if self.index < 0:
            raise ValueError(f"Index must be non-negative, got {self.index}")

    @classmethod
    def from_image_file(cls, image_file: ImageFile) -> "ImagePlane":
        """The first plane of the first series of ``image_file``."""
        return cls(image_file, 0, 0)

    @property
    def url(self) -> str:
        return self.image_file.url

    @property
    def file_name(self) -> Optional[str]:
        return self.image_file.file_name

    @property
    def path_name(self) -> Optional[str]:
        return self.image_file.path_name

    def __str__(self) -> str:
        return f"ImagePlane: {self.url}, series={self.series}, index={self.index}"
