"""
Common test fixtures for imageset tests.
"""

import logging

import pytest

from imageset.core.base_predicate import LiteralPredicate
from imageset.core.image_file import ImageFile
from imageset.core.image_plane import ImagePlane

OME_XML = (
    '<OME xmlns="http://www.openmicroscopy.org/Schemas/OME/2016-06">'
    '<Image ID="Image:0" Name="A01"/>'
    "</OME>"
)


class RecordingPredicate(LiteralPredicate):
    """String predicate that logs each evaluation and passes on literal "pass"."""

    symbol = "recording"

    def __init__(self, log, name):
        super().__init__()
        self.log = log
        self.name = name

    def eval_literal(self, candidate, literal):
        self.log.append(self.name)
        return literal == "pass"


@pytest.fixture
def recording():
    """Factory for sealed recording predicates sharing one call log."""
    log = []

    def make(name, literal):
        predicate = RecordingPredicate(log, name)
        predicate.set_literal(literal)
        return predicate

    make.log = log
    return make


@pytest.fixture
def plane_a():
    """Series 0, frame 5 of file:///a/b.tif."""
    return ImagePlane(ImageFile("file:///a/b.tif"), series=0, index=5)


@pytest.fixture
def plane_c():
    """Series 1, frame 0 of file:///c/b.tif."""
    return ImagePlane(ImageFile("file:///c/b.tif"), series=1, index=0)


@pytest.fixture
def ome_xml():
    return OME_XML


@pytest.fixture(autouse=True)
def reset_imageset_logger():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("imageset")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
