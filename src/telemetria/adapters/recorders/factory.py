"""Recorder factory.

Builds a recorder from a URL-shaped address:

- ``http://[user[:pass]@]host[:port]/database`` (or ``https://``)
- ``udp://host:port/database``
"""

import logging
import socket
from urllib.parse import SplitResult, unquote, urlsplit

from influxdb import InfluxDBClient

from telemetria.adapters.recorders.influx import SimpleRecorder
from telemetria.core.encoding.line_protocol import DEFAULT_PRECISION
from telemetria.core.errors import (
    AddressParseError,
    TransportConstructionError,
    UnsupportedSchemeError,
)

logger = logging.getLogger(__name__)

HTTP_SCHEMES = frozenset({"http", "https"})
UDP_SCHEMES = frozenset({"udp"})

_DEFAULT_HTTP_PORTS = {"http": 80, "https": 443}


def _database_from_path(path: str) -> str:
    """Strip a single leading separator from the URL path and percent-decode it."""
    return unquote(path[1:] if path.startswith("/") else path)


def _parse(address: str) -> tuple[SplitResult, int | None]:
    try:
        url = urlsplit(address)
        port = url.port
    except ValueError as e:
        raise AddressParseError(address, str(e)) from e
    return url, port


def _new_http_recorder(address: str, url: SplitResult, port: int | None) -> SimpleRecorder:
    if not url.hostname:
        raise AddressParseError(address, "missing host")

    credentials: dict[str, str] = {}
    if url.username is not None:
        credentials["username"] = unquote(url.username)
        credentials["password"] = unquote(url.password or "")

    database = _database_from_path(url.path)
    try:
        client = InfluxDBClient(
            host=f"[{url.hostname}]" if ":" in url.hostname else url.hostname,
            port=port or _DEFAULT_HTTP_PORTS[url.scheme],
            database=database or None,
            ssl=url.scheme == "https",
            retries=1,
            **credentials,
        )
    except (OSError, ValueError, TypeError) as e:
        raise TransportConstructionError(address, "HTTP") from e

    return SimpleRecorder(
        client=client,
        database=database,
        precision=DEFAULT_PRECISION,
        transport="http",
    )


def _new_udp_recorder(address: str, url: SplitResult, port: int | None) -> SimpleRecorder:
    if not url.hostname:
        raise AddressParseError(address, "missing host")
    if port is None:
        raise AddressParseError(address, "missing port")

    try:
        socket.getaddrinfo(url.hostname, port, type=socket.SOCK_DGRAM)
        client = InfluxDBClient(host=url.hostname, use_udp=True, udp_port=port)
    except (OSError, ValueError, TypeError) as e:
        raise TransportConstructionError(address, "UDP") from e

    return SimpleRecorder(
        client=client,
        database=_database_from_path(url.path),
        precision=DEFAULT_PRECISION,
        transport="udp",
    )


def new_recorder(address: str) -> SimpleRecorder:
    """Create a recorder writing to the store located at the given address.

    Args:
        address: ``http://``, ``https://`` or ``udp://`` URL whose path names
            the database.

    Returns:
        A SimpleRecorder with nanosecond precision.

    Raises:
        AddressParseError: The address is malformed, lacks a host, or is a
            UDP address without a port.
        UnsupportedSchemeError: The scheme is not http, https or udp.
        TransportConstructionError: The client could not be created.
    """
    url, port = _parse(address)

    if url.scheme in HTTP_SCHEMES:
        recorder = _new_http_recorder(address, url, port)
    elif url.scheme in UDP_SCHEMES:
        recorder = _new_udp_recorder(address, url, port)
    else:
        raise UnsupportedSchemeError(address, url.scheme)

    logger.debug(
        "Created %s recorder for %s (database '%s')",
        recorder.transport,
        url.hostname,
        recorder.database,
    )
    return recorder
