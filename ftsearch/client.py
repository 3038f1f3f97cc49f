from __future__ import annotations

import logging

import coredis
from coredis.exceptions import ResponseError

from ._protocols import AbstractExecutor
from .commands import Command
from .index import IndexOptions, create_index_command, drop_index_command
from .query import QueryOptions, search_command
from .response._callbacks import (
    ResponseCallback,
    SearchResultCallback,
    SimpleStringCallback,
)
from .response.types import QueryResults
from .typing import Any, R, StringT

logger = logging.getLogger(__name__)


class SearchClient:
    """
    Issues RediSearch commands built from option objects through an
    existing redis client.

    The wrapped client owns the connection, the wire protocol and any retry
    or timeout behavior; errors it raises (for example
    :exc:`coredis.exceptions.ResponseError` when the server rejects a command)
    are not wrapped::

        client = SearchClient(coredis.Redis(decode_responses=True))
        await client.create_index(
            "idx", IndexOptions().add_attribute(TextAttribute("title"))
        )
        results = await client.search(QueryOptions("idx", "hello"))
    """

    def __init__(self, client: AbstractExecutor) -> None:
        """
        :param client: The transport used to send commands. Any
         :class:`coredis.Redis` or :class:`coredis.RedisCluster` instance
         can be used.
        """
        self.client = client

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> SearchClient:
        """
        Creates a search client backed by a :class:`coredis.Redis`
        instance connected to :paramref:`url`

        :param kwargs: passed on to :meth:`coredis.Redis.from_url`
        """
        return cls(coredis.Redis.from_url(url, **kwargs))

    async def execute(self, command: Command, callback: ResponseCallback[R]) -> R:
        """
        Sends :paramref:`command` through the wrapped client and returns
        the reply as transformed by :paramref:`callback`
        """
        logger.debug("Executing %s", command)
        return await self.client.create_request(
            command.name.value, *command.arguments, callback=callback
        )

    async def create_index(self, index: StringT, options: IndexOptions) -> bool:
        """
        Creates an index using ``FT.CREATE``

        :param index: The name of the index to create.
        :param options: The index definition and schema.
        """
        return await self.execute(
            create_index_command(index, options), SimpleStringCallback()
        )

    async def drop_index(self, index: StringT, delete_documents: bool = False) -> bool:
        """
        Deletes an index using ``FT.DROPINDEX``

        :param index: The name of the index to delete.
        :param delete_documents: If ``True``, delete the documents associated with the index.
        """
        return await self.execute(
            drop_index_command(index, delete_documents), SimpleStringCallback()
        )

    async def reindex(self, index: StringT, options: IndexOptions) -> bool:
        """
        Drops :paramref:`index` (if it exists) and creates it again with
        :paramref:`options`. The indexed documents are kept.
        """
        try:
            await self.drop_index(index)
        except ResponseError as e:
            logger.info("Ignoring failure to drop index %s before re-creating it: %s", index, e)
        return await self.create_index(index, options)

    async def search(self, options: QueryOptions) -> QueryResults:
        """
        Searches the index named in :paramref:`options` using ``FT.SEARCH``

        :return: the documents returned, decoded according to the flags
         set on :paramref:`options`
        """
        return await self.execute(search_command(options), SearchResultCallback(options))
