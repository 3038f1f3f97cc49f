"""
ftsearch
--------

Builders for RediSearch index and search commands, executed through
an existing coredis client.
"""

from __future__ import annotations

import logging

from ftsearch.client import SearchClient
from ftsearch.commands import Command
from ftsearch.config import Config
from ftsearch.exceptions import FTSearchError, ReplyShapeError
from ftsearch.index import (
    DropIndexOptions,
    IndexOptions,
    NumericAttribute,
    SchemaAttribute,
    StorageType,
    TagAttribute,
    TextAttribute,
    create_index_command,
    drop_index_command,
)
from ftsearch.query import (
    QueryFilter,
    QueryHighlight,
    QueryLimit,
    QueryOptions,
    QuerySummarize,
    filter_value,
    search_command,
)
from ftsearch.response.types import QueryResult, QueryResults
from ftsearch.tokens import CommandName, PrefixToken, PureToken

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "Command",
    "CommandName",
    "Config",
    "DropIndexOptions",
    "FTSearchError",
    "IndexOptions",
    "NumericAttribute",
    "PrefixToken",
    "PureToken",
    "QueryFilter",
    "QueryHighlight",
    "QueryLimit",
    "QueryOptions",
    "QueryResult",
    "QueryResults",
    "QuerySummarize",
    "ReplyShapeError",
    "SchemaAttribute",
    "SearchClient",
    "StorageType",
    "TagAttribute",
    "TextAttribute",
    "create_index_command",
    "drop_index_command",
    "filter_value",
    "search_command",
]

__version__ = "1.0.0"
