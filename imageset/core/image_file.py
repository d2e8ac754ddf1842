# imageset/core/image_file.py
import logging
import os
import re
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Union
from urllib.parse import SplitResult, quote, unquote, urlsplit, urlunsplit
from urllib.request import url2pathname

from .errors import (
    MalformedLocationError,
    UnexpectedRootTypeError,
    UnreconstructableURLError,
)
from .memo import MemoCell

logger = logging.getLogger(__name__)

FILE_SCHEME = "file"
OME_ROOT_TAG = "OME"

# RFC 3986 reserved and unreserved characters, the percent sign and any
# non-ASCII character that is neither a control nor whitespace
_URI_CHARS_RE = re.compile(
    r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%\u00a0-\U0010ffff]*$"
)
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _split_url(url: str) -> SplitResult:
    """Parse ``url``, raising MalformedLocationError if it is not a valid URI."""
    if not _URI_CHARS_RE.match(url) or any(c.isspace() for c in url):
        raise MalformedLocationError(f"Illegal character in URL: {url!r}")
    if _BAD_ESCAPE_RE.search(url):
        raise MalformedLocationError(f"Malformed escape sequence in URL: {url!r}")
    try:
        parts = urlsplit(url)
        parts.port  # validates the port number
    except ValueError as e:
        raise MalformedLocationError(f"Unparsable URL {url!r}: {e}") from e
    if not parts.scheme:
        raise MalformedLocationError(f"URL has no scheme: {url!r}")
    return parts


def _local_path(parts: SplitResult) -> Path:
    if parts.netloc not in ("", "localhost"):
        raise MalformedLocationError(
            f"File URL has a remote authority: {parts.netloc!r}"
        )
    return Path(url2pathname(parts.path))


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


class ImageLocation(ABC):
    """Anything that resolves to an image file: a whole file or one plane."""

    @property
    @abstractmethod
    def url(self) -> str:
        """Canonical URL of the underlying image file."""

    @property
    @abstractmethod
    def file_name(self) -> Optional[str]:
        """File name portion of the URL, or None if it cannot be extracted."""

    @property
    @abstractmethod
    def path_name(self) -> Optional[str]:
        """Folder (or URL prefix) holding the file, or None on failure."""


class ImageFile(ImageLocation):
    """
    Models an image file: a URL for its retrieval plus optional OME metadata.

    The URL never changes after construction. The file and path names are
    derived on first access and memoized; a failed derivation is not
    memoized and is attempted again on the next access.
    """

    def __init__(self, url: str):
        """
        Args:
            url: URL used to retrieve the file, e.g. ``file:///data/a.tif``
        """
        self._url = str(url)
        self._file_name: MemoCell[str] = MemoCell()
        self._path_name: MemoCell[str] = MemoCell()
        self._metadata: Optional[ET.Element] = None

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ImageFile":
        """Create an image file for a local filesystem path."""
        return cls(Path(os.path.abspath(path)).as_uri())

    @property
    def url(self) -> str:
        return self._url

    @property
    def image_file(self) -> "ImageFile":
        return self

    @property
    def file_name(self) -> Optional[str]:
        return self.get_file_name()

    @property
    def path_name(self) -> Optional[str]:
        return self.get_path_name()

    def get_file_name(self) -> Optional[str]:
        """
        Return the file name portion of the URL.

        For ``file`` URLs this is the last component of the local path,
        otherwise the text after the last ``/`` of the URL path.

        Returns:
            The file name, or None if the URL is badly formed.
        """
        try:
            return self._file_name.get(self._compute_file_name)
        except MalformedLocationError as e:
            logger.info(
                f"Failed to extract file name from badly formed URL: {self._url} ({e})"
            )
            return None

    def get_path_name(self) -> Optional[str]:
        """
        Return the path name portion of the URL.

        For ``file`` URLs this is the absolute path of the folder containing
        the file. For other schemes it is the URL preceding the file name.

        Returns:
            The path name, or None if it cannot be extracted.
        """
        try:
            return self._path_name.get(self._compute_path_name)
        except MalformedLocationError as e:
            logger.info(
                f"Failed to extract metadata from badly formed URL: {self._url} ({e})"
            )
            return None
        except UnreconstructableURLError as e:
            logger.warning(f'Failed to reconstitute path from URL, "{self._url}": {e}')
            return None

    def _compute_file_name(self) -> str:
        parts = _split_url(self._url)
        if parts.scheme == FILE_SCHEME:
            return _local_path(parts).name
        path = unquote(parts.path)
        return path[path.rfind("/") + 1 :]

    def _compute_path_name(self) -> str:
        parts = _split_url(self._url)
        if parts.scheme == FILE_SCHEME:
            return str(Path(os.path.abspath(_local_path(parts))).parent)

        if not parts.netloc:
            raise UnreconstructableURLError(
                f"No network location to rebuild a '{parts.scheme}' URL from"
            )
        path = unquote(parts.path)
        last_sep = path.rfind("/")
        prefix = "" if last_sep <= 0 else quote(path[:last_sep])
        return urlunsplit((parts.scheme, parts.netloc, prefix, "", ""))

    def set_metadata(self, root: ET.Element) -> None:
        """
        Attach an already parsed OME document to this file.

        Args:
            root: Root element of the document

        Raises:
            UnexpectedRootTypeError: If ``root`` is not an OME root element
        """
        if not isinstance(root, ET.Element):
            raise UnexpectedRootTypeError(
                f"Expected an XML element, got {type(root).__name__}"
            )
        if _local_name(root.tag) != OME_ROOT_TAG:
            raise UnexpectedRootTypeError(
                f"Root of XML document wasn't {OME_ROOT_TAG}: {root.tag}"
            )
        self._metadata = root

    def set_xml_document(self, source: Union[str, bytes, IO]) -> None:
        """
        Parse OME-XML (e.g. as collected by Bio-Formats) and attach it.

        Args:
            source: The XML as text, bytes or a readable stream

        Raises:
            xml.etree.ElementTree.ParseError: If the XML cannot be parsed
            UnexpectedRootTypeError: If the document root is not OME
        """
        if isinstance(source, (str, bytes)):
            root = ET.fromstring(source)
        else:
            root = ET.parse(source).getroot()
        self.set_metadata(root)

    def clear_xml_document(self) -> None:
        """Remove the metadata document (e.g. to save space)."""
        self._metadata = None

    @property
    def metadata(self) -> Optional[ET.Element]:
        """Root of the attached OME document, if any."""
        return self._metadata

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageFile):
            return NotImplemented
        return self._url == other._url

    def __hash__(self) -> int:
        return hash(self._url)

    def __repr__(self) -> str:
        return f"ImageFile({self._url!r})"

    def __str__(self) -> str:
        return f"ImageFile: {self._url}"
