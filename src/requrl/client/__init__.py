"""src/requrl/client/__init__.py"""

from .auth import build_basic_auth_header
from .request import Request

__all__ = ["Request", "build_basic_auth_header"]
