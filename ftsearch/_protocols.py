from __future__ import annotations

from ftsearch.typing import Any, Awaitable, Callable, Protocol, R, ValueT


class AbstractExecutor(Protocol):
    """
    The transport that commands are handed to. :class:`coredis.Redis` and
    :class:`coredis.RedisCluster` both satisfy this protocol.
    """

    def create_request(
        self,
        name: bytes,
        *arguments: ValueT,
        callback: Callable[..., R],
        execution_parameters: Any = None,
    ) -> Awaitable[R]: ...
