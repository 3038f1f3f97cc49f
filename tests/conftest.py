from __future__ import annotations

import pytest

from ftsearch import SearchClient
from ftsearch.config import Config


class FakeExecutor:
    """
    Stands in for a coredis client: records every request and answers
    with queued replies. Queued exceptions are raised as the transport
    would raise them.
    """

    def __init__(self, protocol_version: int = 2) -> None:
        self.protocol_version = protocol_version
        self.requests: list[tuple[bytes, tuple]] = []
        self.replies: list = []

    def create_request(self, name, *arguments, callback, execution_parameters=None):
        self.requests.append((name, arguments))
        return self._respond(callback)

    async def _respond(self, callback):
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return callback(reply, version=self.protocol_version)


@pytest.fixture
def executor():
    return FakeExecutor()


@pytest.fixture
def resp3_executor():
    return FakeExecutor(protocol_version=3)


@pytest.fixture
def client(executor):
    return SearchClient(executor)


@pytest.fixture
def json_decoding():
    yield Config
    Config.decode_json_documents = None
