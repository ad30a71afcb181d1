"""utils/validators.py

Validation utilities for Requrl.
"""

METHODS = ("GET", "HEAD")


def is_absolute_url(url: str) -> bool:
    """True if ``url`` carries its own scheme."""
    return "://" in url


def validate_method(method: str) -> str:
    """
    Return ``method`` if it is a supported request method.

    Raises:
        ValueError: For any method other than GET or HEAD.
    """
    if method not in METHODS:
        raise ValueError(f"Unsupported request method: {method!r}")
    return method
