from __future__ import annotations

import dataclasses

from ftsearch.typing import Any, Mapping, ResponseType, StringT

#: Type alias for valid python types that can be represented as json
JsonType = str | int | float | bool | dict[str, Any] | list[Any] | None


@dataclasses.dataclass
class QueryResult:
    """
    A single document as returned by `FT.SEARCH <https://redis.io/commands/ft.search>`__
    """

    #: Document key
    key: StringT
    #: Search score if :attr:`~ftsearch.query.QueryOptions.with_scores` was set
    score: float | None = None
    #: Mapping of fields returned for the document, or ``None`` if
    #: :attr:`~ftsearch.query.QueryOptions.no_content` was set. Documents from
    #: ``ON JSON`` indexes are returned as the parsed JSON value.
    fields: Mapping[StringT, ResponseType] | JsonType = None
    #: Explanation of the score if :attr:`~ftsearch.query.QueryOptions.explain_score`
    #: was set
    explanation: ResponseType = None


@dataclasses.dataclass
class QueryResults:
    """
    Search results as returned by `FT.SEARCH <https://redis.io/commands/ft.search>`__
    """

    #: The total number of documents matching the query (which can be larger
    #: than the number of documents returned)
    count: int
    #: The documents returned, keyed by document key in the order returned
    documents: dict[StringT, QueryResult] = dataclasses.field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.documents)

    def __getitem__(self, key: StringT) -> QueryResult:
        return self.documents[key]
