# topmark:header:start
#
#   project      : TypeSniff
#   file         : resources.py
#   file_relpath : src/typesniff/resources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resources that can be inspected by the detector.

A resource is one of three variants:

- `LocalResource`: a directory of sample files.
- `RemoteResource`: a network endpoint, fetched each time it is opened.
- `CachedRemoteResource`: a network endpoint fetched at most once; further
  opens are served from memory.

`Resource` is the union of the three and is dispatched with ``match`` by the
detector. `resource_from_target` turns a CLI-style target (directory path or
``http(s)`` URL) into the matching variant.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, TYPE_CHECKING
from urllib.parse import urlsplit

from typesniff.config.logging import get_logger
from typesniff.errors import ResourceError
from typesniff.utils.files import list_files

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typesniff.config.logging import TypeSniffLogger
    from typesniff.net import Fetcher

logger: TypeSniffLogger = get_logger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Basic-auth credentials for a remote resource."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class LocalResource:
    """A local directory of sample files.

    Attributes:
        path (Path): The directory.
    """

    path: Path

    @property
    def uri(self) -> str:
        """The directory as a ``file:`` URI."""
        return self.path.resolve().as_uri()

    def files(
        self,
        patterns: Iterable[str],
        *,
        max_depth: int,
        include_hidden: bool = False,
    ) -> list[Path]:
        """List candidate sample files (sorted, depth-bounded, pattern-filtered)."""
        return list_files(
            self.path, patterns, max_depth=max_depth, include_hidden=include_hidden
        )


@dataclass(frozen=True)
class RemoteResource:
    """A network endpoint.

    Attributes:
        uri (str): Absolute ``http(s)`` URI.
        credentials (Credentials | None): Optional basic-auth credentials.
    """

    uri: str
    credentials: Credentials | None = None

    def open_stream(self, fetcher: Fetcher) -> IO[bytes]:
        """Fetch the endpoint and return its body as a binary stream.

        Raises:
            ResourceError: If the endpoint cannot be fetched.
        """
        return io.BytesIO(fetcher.fetch(self.uri, self.credentials))

    def to_cached(self, fetcher: Fetcher) -> CachedRemoteResource:
        """Return a cached view of this resource bound to ``fetcher``."""
        return CachedRemoteResource(self.uri, self.credentials, fetcher)


class CachedRemoteResource:
    """A network endpoint whose content is fetched at most once.

    A fetch failure is not cached: the next `open_stream` tries again.

    Args:
        uri (str): Absolute ``http(s)`` URI.
        credentials (Credentials | None): Optional basic-auth credentials.
        fetcher (Fetcher): Transport used for the single fetch.
    """

    def __init__(self, uri: str, credentials: Credentials | None, fetcher: Fetcher) -> None:
        self.uri: str = uri
        self.credentials: Credentials | None = credentials
        self.fetcher: Fetcher = fetcher
        self._content: bytes | None = None

    def __repr__(self) -> str:
        return f"CachedRemoteResource(uri={self.uri!r}, cached={self._content is not None})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CachedRemoteResource):
            return NotImplemented
        return self.uri == other.uri and self.credentials == other.credentials

    def __hash__(self) -> int:
        return hash((self.uri, self.credentials))

    @property
    def is_cached(self) -> bool:
        """Whether the content has already been fetched."""
        return self._content is not None

    def content(self) -> bytes:
        """Return the content, fetching it on first use.

        Raises:
            ResourceError: If the endpoint cannot be fetched.
        """
        if self._content is None:
            self._content = self.fetcher.fetch(self.uri, self.credentials)
        return self._content

    def open_stream(self) -> IO[bytes]:
        """Return a fresh binary stream over the (cached) content."""
        return io.BytesIO(self.content())

    def derive(self, uri: str) -> CachedRemoteResource:
        """Return the same resource for another URI.

        Credentials and fetcher are shared; the cache is shared only when the URI
        is unchanged.
        """
        if uri == self.uri:
            return self
        return CachedRemoteResource(uri, self.credentials, self.fetcher)

    def to_cached(self, fetcher: Fetcher | None = None) -> CachedRemoteResource:
        """Return self; the resource is already cached."""
        return self


Resource = LocalResource | RemoteResource | CachedRemoteResource


def is_remote_uri(target: str) -> bool:
    """Whether ``target`` looks like an ``http(s)`` URL."""
    return urlsplit(target).scheme.lower() in ("http", "https")


def resource_from_target(target: str, credentials: Credentials | None = None) -> Resource:
    """Build a resource from a directory path or an ``http(s)`` URL.

    Args:
        target (str): Directory path or URL.
        credentials (Credentials | None): Credentials for remote targets.

    Returns:
        Resource: `RemoteResource` for URLs, `LocalResource` for directories.

    Raises:
        ResourceError: If ``target`` is neither a URL nor an existing directory.
    """
    if is_remote_uri(target):
        parts = urlsplit(target)
        if not parts.netloc:
            raise ResourceError(f"URL without a host: {target}")
        return RemoteResource(target, credentials)
    path = Path(target)
    if not path.is_dir():
        raise ResourceError(f"Not a directory or http(s) URL: {target}")
    logger.debug("Local resource: %s", path)
    return LocalResource(path)
