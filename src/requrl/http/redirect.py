"""src/requrl/http/redirect.py

Redirect target resolution.

Servers are expected to send absolute locators in ``Location``, but many
send absolute paths or paths relative to the current directory instead.
"""

from typing import Optional

from requrl.http.ports import PortResolver
from requrl.http.url import SCHEME_SEPARATOR, ParseResult, URLComponents, parse_url
from requrl.utils.validators import is_absolute_url

__all__ = ["build_redirect_url", "resolve_redirect"]


def build_redirect_url(current: Optional[URLComponents], location: str) -> str:
    """
    Build the locator a redirect points to.

    Args:
        current: Components of the request being redirected, or None when
            no locator is in effect.
        location: Value of the ``Location`` header.

    Returns:
        ``location`` itself when it is absolute, otherwise ``location``
        joined to the protocol and host (and directory, for relative paths)
        of ``current``.

        The port of ``current`` is not carried over: non-absolute targets
        resolve to the default port of the protocol.
    """
    if is_absolute_url(location):
        return location

    if current is None:
        protocol = host = directory = ""
    else:
        protocol, host, directory = current.protocol, current.host, current.directory

    origin = f"{protocol}{SCHEME_SEPARATOR}{host}"
    if location.startswith("/"):
        return origin + location
    return f"{origin}{directory}/{location}"


def resolve_redirect(
    current: Optional[URLComponents],
    location: str,
    resolver: Optional[PortResolver] = None,
) -> ParseResult:
    """Resolve ``location`` against ``current`` and parse the result."""
    return parse_url(build_redirect_url(current, location), resolver)
