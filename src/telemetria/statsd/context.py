"""Context-scoped holder for the statsd client.

The client is bound to a ``contextvars.ContextVar``, so each thread and each
asyncio task sees its own binding. Helpers in telemetria.statsd.functions
look the client up here unless one is passed explicitly.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any

from datadog.dogstatsd import DogStatsd

from telemetria.core.errors import MissingClientError
from telemetria.core.ports import StatsClientPort

_statsd_client: ContextVar[StatsClientPort | None] = ContextVar(
    "statsd.client", default=None
)


def set_client(client: StatsClientPort) -> Token:
    """Bind the statsd client to the current context.

    Returns:
        Token that restores the previous binding when passed to reset_client.
    """
    return _statsd_client.set(client)


def reset_client(token: Token) -> None:
    """Restore the binding that was active before set_client."""
    _statsd_client.reset(token)


def create_client(namespace: str, **options: Any) -> DogStatsd:
    """Create a new DogStatsd client.

    Args:
        namespace: Prefix applied to every metric name.
        **options: Forwarded verbatim to DogStatsd (host, port,
            constant_tags, socket_timeout, ...).
    """
    return DogStatsd(namespace=namespace, **options)


def new(namespace: str, **options: Any) -> Token:
    """Create a new statsd client and bind it to the current context."""
    return set_client(create_client(namespace, **options))


def client_from_context() -> StatsClientPort:
    """Return the statsd client bound to the current context.

    Raises:
        MissingClientError: No client was bound. This means set_client or
            new was never called, which is a programming error.
    """
    client = _statsd_client.get()
    if client is None:
        raise MissingClientError("No statsd client found in context")
    return client


@contextmanager
def use_client(client: StatsClientPort) -> Iterator[StatsClientPort]:
    """Bind a client for the duration of a with block."""
    token = set_client(client)
    try:
        yield client
    finally:
        reset_client(token)
