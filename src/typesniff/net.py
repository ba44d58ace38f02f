# topmark:header:start
#
#   project      : TypeSniff
#   file         : net.py
#   file_relpath : src/typesniff/net.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTTP access for remote resources.

Remote detection only ever needs "give me the bytes behind this URI". That need
is captured by the `Fetcher` protocol so tests (and embedders) can plug in an
in-memory implementation. `HttpFetcher` is the production implementation on
top of a `requests.Session`.

There are no retries: a failed request is reported once as `ResourceError` and
the caller treats it as "no match".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import requests

from typesniff.config.logging import get_logger
from typesniff.constants import DEFAULT_HTTP_TIMEOUT, DEFAULT_USER_AGENT
from typesniff.errors import ResourceError

if TYPE_CHECKING:
    from typesniff.config.logging import TypeSniffLogger
    from typesniff.resources import Credentials

logger: TypeSniffLogger = get_logger(__name__)


class Fetcher(Protocol):
    """Retrieves the content behind a URI."""

    def fetch(self, uri: str, credentials: Credentials | None = None) -> bytes:
        """Return the full response body of ``uri``.

        Raises:
            ResourceError: If the URI is malformed or cannot be retrieved.
        """
        ...


class HttpFetcher:
    """`Fetcher` backed by `requests`.

    Args:
        timeout (float): Seconds passed as ``timeout`` to every request.
        user_agent (str): ``User-Agent`` header value.
        session (requests.Session | None): Session to reuse; a new one is created
            when omitted.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout: float = timeout
        self._session: requests.Session = session or requests.Session()
        self._session.headers["User-Agent"] = user_agent

    def fetch(self, uri: str, credentials: Credentials | None = None) -> bytes:
        """Issue a GET request and return the body.

        Raises:
            ResourceError: On malformed URIs, transport errors and non-2xx responses.
        """
        auth: tuple[str, str] | None = (
            (credentials.username, credentials.password) if credentials is not None else None
        )
        logger.debug("GET %s", uri)
        try:
            response: requests.Response = self._session.get(uri, auth=auth, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise ResourceError(f"Cannot fetch {uri}: {exc}") from exc
        logger.trace("GET %s -> %d (%d bytes)", uri, response.status_code, len(response.content))
        return response.content

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()
