"""client/auth.py

Authentication helpers for Requrl.
"""

import base64
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from requrl.client.request import Request


def build_basic_auth_header(request: "Request") -> Optional[str]:
    """
    Build a Basic Authorization header from the locator's userinfo.

    Args:
        request: Request whose current locator may carry ``user:pass@``.

    Returns:
        Header value, or None if the locator has no username.
    """
    if not request.username:
        return None
    credentials = f"{request.username}:{request.password}"
    token = credentials.encode("utf-8", "surrogateescape")
    return "Basic " + base64.b64encode(token).decode("ascii")
