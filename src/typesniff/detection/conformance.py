# topmark:header:start
#
#   project      : TypeSniff
#   file         : conformance.py
#   file_relpath : src/typesniff/detection/conformance.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conformance check for OGC API - Features endpoints.

An OGC API landing page is a JSON document whose ``links`` array contains a
link with ``rel == "conformance"``. The linked conformance declaration lists
the implemented conformance classes under ``conformsTo``. An endpoint is
accepted when that list contains the Features Part 1 core class.

Every failure (malformed URI, transport error, invalid UTF-8, invalid JSON,
unexpected document shape) is logged and reported as ``False``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, cast
from urllib.parse import urljoin, urlsplit

from typesniff.config.logging import get_logger
from typesniff.constants import CONFORMANCE, CONFORMANCE_URL_COMPLIANT, CONFORMS_TO, HREF, LINKS, REL
from typesniff.errors import ResourceError

if TYPE_CHECKING:
    from typesniff.config.logging import TypeSniffLogger
    from typesniff.net import Fetcher
    from typesniff.resources import Credentials

logger: TypeSniffLogger = get_logger(__name__)


def _fetch_json(uri: str, fetcher: Fetcher, credentials: Credentials | None) -> Any:
    """Fetch ``uri`` and decode it as UTF-8 JSON.

    Raises:
        ResourceError: If the document cannot be fetched or decoded.
    """
    content: bytes = fetcher.fetch(uri, credentials)
    try:
        return json.loads(content.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise ResourceError(f"{uri} is not UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ResourceError(f"{uri} is not JSON: {e}") from e
    except RecursionError as e:
        raise ResourceError(f"{uri} is nested too deeply") from e


def find_conformance_href(document: Any) -> str | None:
    """Return the ``href`` of the first conformance link of a landing page.

    Args:
        document (Any): Decoded JSON landing page.

    Returns:
        str | None: The link target, or None when the document has no ``links``
            array or no conformance link with an ``href``.
    """
    if not isinstance(document, dict):
        return None
    links: Any = cast("dict[str, Any]", document).get(LINKS)
    if not isinstance(links, list):
        return None
    for link in cast("list[Any]", links):
        if not isinstance(link, dict):
            continue
        entry = cast("dict[str, Any]", link)
        href: Any = entry.get(HREF)
        if entry.get(REL) == CONFORMANCE and isinstance(href, str):
            return href
    return None


def declares_core_conformance(document: Any) -> bool:
    """Whether a conformance declaration lists the Features core class."""
    if not isinstance(document, dict):
        return False
    conforms_to: Any = cast("dict[str, Any]", document).get(CONFORMS_TO)
    if not isinstance(conforms_to, list):
        return False
    return CONFORMANCE_URL_COMPLIANT in cast("list[Any]", conforms_to)


def resolve_href(base: str, href: str) -> str:
    """Resolve a link target against the document it was found in.

    Raises:
        ResourceError: If ``href`` is not a valid URI reference.
    """
    try:
        return urljoin(base, href)
    except ValueError as e:
        raise ResourceError(f"Malformed link {href!r}: {e}") from e


def same_origin(a: str, b: str) -> bool:
    """Whether two absolute URIs share scheme and host (including port)."""
    first, second = urlsplit(a), urlsplit(b)
    return (first.scheme.lower(), first.netloc.lower()) == (
        second.scheme.lower(),
        second.netloc.lower(),
    )


def check_resource_path(
    uri: str,
    fetcher: Fetcher,
    credentials: Credentials | None = None,
) -> bool:
    """Check that ``uri`` is an OGC API - Features landing page.

    At most two documents are fetched: the landing page and, if it links one,
    the conformance declaration. A relative conformance ``href`` is resolved
    against ``uri``.

    Args:
        uri (str): Landing page URI.
        fetcher (Fetcher): Transport used for both fetches.
        credentials (Credentials | None): Optional credentials. They are sent to the
            conformance declaration only when it lives on the same host.

    Returns:
        bool: True if the conformance declaration lists the core class.
    """
    try:
        href: str | None = find_conformance_href(_fetch_json(uri, fetcher, credentials))
        if href is None:
            logger.debug("No conformance link in %s", uri)
            return False
        conformance_uri: str = resolve_href(uri, href)
        logger.debug("Conformance declaration of %s: %s", uri, conformance_uri)
        if credentials is not None and not same_origin(uri, conformance_uri):
            logger.info("Not sending credentials to %s (other host)", conformance_uri)
            credentials = None
        return declares_core_conformance(_fetch_json(conformance_uri, fetcher, credentials))
    except ResourceError as e:
        logger.error("Error occurred during resource path checking of %s: %s", uri, e)
        return False
