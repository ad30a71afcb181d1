"""src/requrl/client/request.py

Request state: the locator of one network resource plus its redirect
lineage.
"""

import logging
from typing import Optional

from requrl.exceptions import InvalidURL
from requrl.http.ports import DEFAULT_PORT_TABLE, PortResolver
from requrl.http.redirect import resolve_redirect
from requrl.http.url import ParseResult, URLComponents, parse_url
from requrl.utils.validators import validate_method

__all__ = ["Request"]

logger = logging.getLogger(__name__)


class Request:
    """
    Addressable network resource and the bookkeeping carried across
    redirects.

    A Request is owned by a single caller (one download attempt, for
    instance) and is not safe to mutate from several threads at once.

    Attributes:
        raw_url: Last locator given to ``set_url``, unparsed.
        current_url: Locator of the last parse attempt (fragment removed,
            percent-encoded, query included).
        referer_url: Referer sent with the request; restored into
            ``previous_url`` by ``reset_url``.
        previous_url: Locator this request came from, if any.
        try_count: Number of attempts made by the caller.
        keep_alive_hint: Server announced keep-alive support.
        pipelining_hint: Server is believed to support pipelining.
        last_error: Error of the last parse attempt, or None after success.

    Example::

        req = Request()
        if req.set_url("http://example.com/files/a.iso"):
            req.host       # "example.com"
            req.directory  # "/files"
            req.file       # "a.iso"
        req.redirect_url("mirror/a.iso")
        req.current_url    # "http://example.com/files/mirror/a.iso"
    """

    METHOD_GET = "GET"
    METHOD_HEAD = "HEAD"

    PROTO_HTTP = "http"
    PROTO_HTTPS = "https"
    PROTO_FTP = "ftp"

    # pylint: disable=too-many-instance-attributes
    __slots__ = (
        "raw_url",
        "current_url",
        "referer_url",
        "previous_url",
        "try_count",
        "keep_alive_hint",
        "pipelining_hint",
        "last_error",
        "_method",
        "_redirect_count",
        "_persistent_connection_supported",
        "_components",
        "_resolver",
    )

    def __init__(
        self,
        method: str = METHOD_GET,
        port_resolver: Optional[PortResolver] = None,
    ) -> None:
        """
        Initialize an empty Request.

        Args:
            method: Request method, GET or HEAD.
            port_resolver: Default-port lookup used by every parse.
                Defaults to ``DEFAULT_PORT_TABLE``.
        """
        self.raw_url = ""
        self.current_url = ""
        self.referer_url = ""
        self.previous_url = ""
        self.try_count = 0
        self.keep_alive_hint = False
        self.pipelining_hint = False
        self.last_error: Optional[InvalidURL] = None
        self._method = validate_method(method)
        self._redirect_count = 0
        self._persistent_connection_supported = True
        self._components: Optional[URLComponents] = None
        self._resolver: PortResolver = port_resolver or DEFAULT_PORT_TABLE

    def set_url(self, url: str) -> bool:
        """Store ``url`` as the raw locator and parse it."""
        self.raw_url = url
        return self._apply(parse_url(url, self._resolver))

    def reset_url(self) -> bool:
        """
        Parse the stored raw locator again.

        Used to retry the original locator (after an authentication
        challenge, for instance). The redirect count is left alone.
        """
        self.previous_url = self.referer_url
        logger.debug("Resetting request to %r", self.raw_url)
        return self._apply(parse_url(self.raw_url, self._resolver))

    def redirect_url(self, location: str) -> bool:
        """
        Follow a redirect to ``location``.

        The redirect is counted and persistent connections are assumed
        supported again even if ``location`` turns out to be malformed.

        Args:
            location: ``Location`` header value; absolute locator,
                absolute path or path relative to the current directory.

        Returns:
            True if the resolved locator was parsed.
        """
        self.previous_url = ""
        self._persistent_connection_supported = True
        self._redirect_count += 1
        result = resolve_redirect(self._components, location, self._resolver)
        logger.debug("Redirect #%d to %r", self._redirect_count, result.url)
        return self._apply(result)

    def reset_redirect_count(self) -> None:
        """Set the redirect count back to zero."""
        self._redirect_count = 0

    def _apply(self, result: ParseResult) -> bool:
        self.current_url = result.url
        self._components = result.components
        self.last_error = result.error
        return result.ok

    @property
    def redirect_count(self) -> int:
        """Number of redirects followed since the last reset."""
        return self._redirect_count

    @property
    def persistent_connection_supported(self) -> bool:
        """Whether the connection may be reused for the next request."""
        return self._persistent_connection_supported

    @persistent_connection_supported.setter
    def persistent_connection_supported(self, value: bool) -> None:
        self._persistent_connection_supported = value

    def supports_persistent_connection(self) -> bool:
        """Same as the ``persistent_connection_supported`` property."""
        return self._persistent_connection_supported

    def set_persistent_connection_supported(self, value: bool) -> None:
        """Mark whether the connection may be reused."""
        self._persistent_connection_supported = value

    @property
    def method(self) -> str:
        """Request method, GET or HEAD."""
        return self._method

    @method.setter
    def method(self, value: str) -> None:
        self._method = validate_method(value)

    @property
    def components(self) -> Optional[URLComponents]:
        """Components of the current locator, or None after a failed parse."""
        return self._components

    @property
    def protocol(self) -> str:
        return self._components.protocol if self._components else ""

    @property
    def host(self) -> str:
        return self._components.host if self._components else ""

    @property
    def port(self) -> int:
        return self._components.port if self._components else 0

    @property
    def directory(self) -> str:
        return self._components.directory if self._components else ""

    @property
    def file(self) -> str:
        return self._components.file if self._components else ""

    @property
    def query(self) -> str:
        return self._components.query if self._components else ""

    @property
    def username(self) -> str:
        return self._components.username if self._components else ""

    @property
    def password(self) -> str:
        return self._components.password if self._components else ""

    def __repr__(self) -> str:
        return (
            f"Request({self._method} {self.current_url!r}, "
            f"redirects={self._redirect_count})"
        )
