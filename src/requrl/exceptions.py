"""src/requrl/exceptions.py

Requrl Exceptions hierarchy.
"""


class RequrlError(Exception):
    """Base exception for all Requrl errors."""


class RequestError(RequrlError):
    """General exception for Request errors."""


class InvalidURL(RequestError):
    """
    Base exception for locators that could not be parsed.

    The parser does not raise these: it returns them inside a
    ``ParseResult``. ``ParseResult.unwrap()`` raises them on demand.
    """

    def __init__(self, message: str = "Invalid URL", url: str = ""):
        super().__init__(message)
        self.url = url


class MissingScheme(InvalidURL):
    """No ``://`` separator found in the locator."""


class UnknownProtocol(InvalidURL):
    """Scheme is not known to the default-port resolver."""


class MissingHost(InvalidURL):
    """Empty host segment after the scheme."""


class InvalidPort(InvalidURL):
    """Port is not a base-10 integer in the 1..65535 range."""
