"""src/requrl/http/ports.py

Default port lookup and strict port number parsing.
"""

import types
from typing import Dict, Mapping, Optional, Protocol

__all__ = [
    "DEFAULT_PORTS",
    "DEFAULT_PORT_TABLE",
    "PortResolver",
    "PortTable",
    "parse_port",
]

MAX_PORT = 65535

DEFAULT_PORTS: Mapping[str, int] = types.MappingProxyType(
    {"http": 80, "https": 443, "ftp": 21}
)


class PortResolver(Protocol):
    """Anything that maps a protocol token to its default port."""

    def lookup(self, protocol: str) -> Optional[int]:
        """Return the default port, or None for unknown protocols.

        A port of 0 is treated as unknown as well.
        """


class PortTable:
    """
    Read-only protocol to default-port table.

    Lookups ignore case. The table is never mutated after construction, so
    one instance can be shared freely.

    Example::

        table = PortTable(ws=80, wss=443)
        table.lookup("WS")  # 80
    """

    __slots__ = ("_ports",)

    def __init__(self, ports: Optional[Mapping[str, int]] = None, **extra: int):
        merged: Dict[str, int] = dict(DEFAULT_PORTS if ports is None else ports)
        merged.update(extra)
        for name, port in merged.items():
            if not 0 < port <= MAX_PORT:
                raise ValueError(f"Invalid default port for {name!r}: {port}")
        self._ports = {name.lower(): port for name, port in merged.items()}

    def lookup(self, protocol: str) -> Optional[int]:
        """Return the default port of ``protocol``, or None if unsupported."""
        return self._ports.get(protocol.lower())

    def __contains__(self, protocol: object) -> bool:
        return isinstance(protocol, str) and protocol.lower() in self._ports

    def __repr__(self) -> str:
        return f"PortTable({self._ports!r})"


DEFAULT_PORT_TABLE = PortTable()


def parse_port(value: str) -> int:
    """
    Parse a port number strictly.

    Args:
        value: Port substring taken from the host segment.

    Returns:
        Port as integer.

    Raises:
        ValueError: If ``value`` is not made of ASCII digits only, or is
            outside 1..65535.
    """
    if not value or not value.isascii() or not value.isdigit():
        raise ValueError(f"Invalid port: {value!r}")
    port = int(value, 10)
    if not 0 < port <= MAX_PORT:
        raise ValueError(f"Port out of range: {value!r}")
    return port
