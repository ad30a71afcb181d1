"""src/requrl/http/url.py

URL parser for Requrl.

Splits a locator into the components a client needs to address a request.
Parsing never raises: the outcome is a ``ParseResult`` holding either a
``URLComponents`` record or the error describing why the locator was
rejected.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from requrl.exceptions import (
    InvalidPort,
    InvalidURL,
    MissingHost,
    MissingScheme,
    UnknownProtocol,
)
from requrl.http.encoding import urldecode, urlencode
from requrl.http.ports import DEFAULT_PORT_TABLE, PortResolver, parse_port

__all__ = ["SCHEME_SEPARATOR", "URLComponents", "ParseResult", "parse_url"]

logger = logging.getLogger(__name__)

SCHEME_SEPARATOR = "://"


@dataclass(frozen=True)
class URLComponents:
    """
    Components of a successfully parsed locator.

    Attributes:
        protocol: Scheme token, case preserved as given.
        host: Host name, without userinfo and port.
        port: Explicit port, or the protocol default.
        default_port: Default port of ``protocol``.
        directory: Directory part, always starting with ``/`` and without
            a trailing slash unless it is the root.
        file: Last path segment, possibly empty.
        query: Query string including the leading ``?``, or empty.
        username: Percent-decoded user name, or empty.
        password: Percent-decoded password, or empty.
    """

    # pylint: disable=too-many-instance-attributes
    protocol: str
    host: str
    port: int
    default_port: int
    directory: str = "/"
    file: str = ""
    query: str = ""
    username: str = ""
    password: str = ""

    @property
    def path(self) -> str:
        """Directory and file joined back into a path."""
        if self.directory == "/":
            return "/" + self.file
        return f"{self.directory}/{self.file}"

    @property
    def request_target(self) -> str:
        """Path plus query, as written on an HTTP request line."""
        return self.path + self.query

    @property
    def host_header(self) -> str:
        """Host, with the port appended when it is not the default one."""
        if self.port == self.default_port:
            return self.host
        return f"{self.host}:{self.port}"

    def geturl(self) -> str:
        """Rebuild a locator that parses back to the same components.

        Credentials are left out.
        """
        origin = f"{self.protocol}{SCHEME_SEPARATOR}{self.host_header}"
        return origin + self.request_target


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of ``parse_url``.

    Attributes:
        url: The locator actually parsed: fragment removed and
            percent-encoded, query included. Set even on failure.
        components: Parsed components, or None on failure.
        error: Error describing the failure, or None on success.
    """

    url: str
    components: Optional[URLComponents] = None
    error: Optional[InvalidURL] = None

    def __bool__(self) -> bool:
        return self.components is not None

    @property
    def ok(self) -> bool:
        """True if the locator was parsed."""
        return self.components is not None

    def unwrap(self) -> URLComponents:
        """
        Return the components or raise the parse error.

        Raises:
            InvalidURL: The subclass matching the failure kind.
        """
        if self.components is None:
            raise self.error or InvalidURL(url=self.url)
        return self.components


def _fail(url: str, error: InvalidURL) -> ParseResult:
    logger.debug("Failed to parse URL %r: %s", url, error)
    return ParseResult(url=url, error=error)


# pylint: disable=too-many-locals,too-many-return-statements
def parse_url(raw: str, resolver: Optional[PortResolver] = None) -> ParseResult:
    """
    Parse a locator into its components.

    Args:
        raw: Locator as received (may carry a fragment, unencoded bytes,
            userinfo and a query).
        resolver: Default-port lookup. Defaults to ``DEFAULT_PORT_TABLE``.

    Returns:
        ParseResult with components on success, or with one of
        ``MissingScheme``, ``UnknownProtocol``, ``MissingHost`` or
        ``InvalidPort`` on failure.
    """
    if resolver is None:
        resolver = DEFAULT_PORT_TABLE

    url = urlencode(raw.partition("#")[0])

    work, separator, query = url.partition("?")
    query = separator + query

    scheme_end = work.find(SCHEME_SEPARATOR)
    if scheme_end == -1:
        return _fail(url, MissingScheme(f"No scheme in URL: {url!r}", url))

    protocol = work[:scheme_end]
    default_port = resolver.lookup(protocol)
    if not default_port:
        return _fail(url, UnknownProtocol(f"Unknown protocol: {protocol!r}", url))

    host_start = scheme_end + len(SCHEME_SEPARATOR)
    if len(work) <= host_start:
        return _fail(url, MissingHost(f"No host in URL: {url!r}", url))

    host_end = work.find("/", host_start)
    if host_end == -1:
        host_end = len(work)
    host_part = work[host_start:host_end]

    username = password = ""
    userinfo, at_sign, host_part = host_part.rpartition("@")
    if at_sign:
        user, _, secret = userinfo.partition(":")
        username = urldecode(user)
        password = urldecode(secret)

    host, _, port_str = host_part.partition(":")
    if not host:
        return _fail(url, MissingHost(f"No host in URL: {url!r}", url))

    if port_str:
        try:
            port = parse_port(port_str)
        except ValueError as exc:
            return _fail(url, InvalidPort(str(exc), url))
    else:
        port = default_port

    dir_end = work.rfind("/")
    if dir_end <= host_end:
        directory = "/"
        dir_end = host_end
    else:
        directory = "/" + work[host_end:dir_end].strip("/")

    components = URLComponents(
        protocol=protocol,
        host=host,
        port=port,
        default_port=default_port,
        directory=directory,
        file=work[dir_end + 1 :],
        query=query,
        username=username,
        password=password,
    )
    return ParseResult(url=url, components=components)
