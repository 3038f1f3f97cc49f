from __future__ import annotations

import json
from abc import ABC, ABCMeta, abstractmethod

from ftsearch._utils import EncodingInsensitiveDict, nativestr
from ftsearch.config import Config
from ftsearch.exceptions import ReplyShapeError
from ftsearch.query import QueryOptions
from ftsearch.response.types import QueryResult, QueryResults
from ftsearch.typing import (
    Any,
    Generic,
    Literal,
    ResponseType,
    StringT,
    TypeVar,
    add_runtime_checks,
)

R = TypeVar("R")


class ResponseCallbackMeta(ABCMeta):
    def __new__(
        cls, name: str, bases: tuple[type, ...], namespace: dict[str, Any]
    ) -> ResponseCallbackMeta:
        kls = super().__new__(cls, name, bases, namespace)
        setattr(kls, "transform", add_runtime_checks(getattr(kls, "transform")))
        setattr(kls, "transform_3", add_runtime_checks(getattr(kls, "transform_3")))
        return kls


class ResponseCallback(ABC, Generic[R], metaclass=ResponseCallbackMeta):
    """
    Converts the raw reply for a command into the value returned to the caller.

    Instances are passed as the ``callback`` of a request created on the
    transport, which calls them with the reply and the RESP protocol version
    of the connection.
    """

    def __call__(
        self,
        response: ResponseType,
        version: Literal[2, 3] = 2,
        **options: Any,
    ) -> R:
        if isinstance(response, BaseException):
            raise response
        if version == 3:
            return self.transform_3(response, **options)
        return self.transform(response, **options)

    @abstractmethod
    def transform(self, response: ResponseType, **options: Any) -> R:
        pass

    def transform_3(self, response: ResponseType, **options: Any) -> R:
        return self.transform(response, **options)


class SimpleStringCallback(ResponseCallback[bool]):
    def __init__(self, ok_values: set[str] = {"OK"}):
        self.ok_values: set[StringT] = {*ok_values, *(v.encode() for v in ok_values)}

    def transform(self, response: ResponseType, **options: Any) -> bool:
        return isinstance(response, (str, bytes)) and response in self.ok_values


class SearchResultCallback(ResponseCallback[QueryResults]):
    """
    Decodes a ``FT.SEARCH`` reply using the :class:`~ftsearch.query.QueryOptions`
    the request was built from.

    A RESP2 reply is a flat list: the total count followed by a fixed number
    of elements per document (see :attr:`~ftsearch.query.QueryOptions.stride`)
    in the order ``key [score] [explanation] [fields]``. Any deviation from
    that shape raises :exc:`~ftsearch.exceptions.ReplyShapeError`.
    """

    def __init__(self, query: QueryOptions) -> None:
        self.query = query

    def transform(self, response: ResponseType, **options: Any) -> QueryResults:
        if not isinstance(response, list) or not response:
            raise ReplyShapeError("Expected a non empty list as the search reply", response)
        count = self._count(response[0], response)
        stride = self.query.stride
        body = response[1:]
        if len(body) % stride:
            raise ReplyShapeError(
                f"Search reply has {len(body)} elements after the count which is not"
                f" a multiple of {stride} (the number of elements per document)",
                response,
            )
        results = QueryResults(count)
        for start in range(0, len(body), stride):
            section = body[start : start + stride]
            key = self._key(section[0], response)
            position = 1
            score = explanation = fields = None
            if self.query.with_scores:
                score = self._score(section[position], response)
                position += 1
            if self.query.explain_score:
                explanation = section[position]
                position += 1
            if not self.query.no_content:
                fields = self._fields(section[position], response)
            self._add(results, QueryResult(key, score, fields, explanation), response)
        return results

    def transform_3(self, response: ResponseType, **options: Any) -> QueryResults:
        if isinstance(response, list):
            return self.transform(response, **options)
        if not isinstance(response, dict):
            raise ReplyShapeError("Expected a map or a list as the search reply", response)
        reply = EncodingInsensitiveDict(response)
        if "total_results" not in reply or not isinstance(reply.get("results"), list):
            raise ReplyShapeError(
                "Search reply is missing the total_results or results entries", response
            )
        results = QueryResults(self._count(reply["total_results"], response))
        for item in reply["results"]:
            document = EncodingInsensitiveDict(item if isinstance(item, dict) else {})
            if "id" not in document:
                raise ReplyShapeError("Search reply document is missing an id", response)
            key = self._key(document["id"], response)
            score = explanation = fields = None
            if self.query.with_scores or self.query.explain_score:
                raw_score = document.get("score")
                if self.query.explain_score and isinstance(raw_score, list):
                    if len(raw_score) != 2:
                        raise ReplyShapeError("Malformed score explanation", response)
                    raw_score, explanation = raw_score
                if self.query.with_scores:
                    score = self._score(raw_score, response)
            if not self.query.no_content:
                fields = self._fields(document.get("extra_attributes", {}), response)
            self._add(results, QueryResult(key, score, fields, explanation), response)
        return results

    @staticmethod
    def _add(results: QueryResults, document: QueryResult, response: ResponseType) -> None:
        if document.key in results.documents:
            raise ReplyShapeError(
                f"Search reply contains the document {document.key!r} more than once",
                response,
            )
        results.documents[document.key] = document

    @staticmethod
    def _count(value: ResponseType, response: ResponseType) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ReplyShapeError(
                f"Expected an integer result count, got {value!r}", response
            )
        return value

    @staticmethod
    def _key(value: ResponseType, response: ResponseType) -> StringT:
        if not isinstance(value, (str, bytes)):
            raise ReplyShapeError(f"Expected a document key, got {value!r}", response)
        return value

    @staticmethod
    def _score(value: ResponseType, response: ResponseType) -> float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        if isinstance(value, (str, bytes)):
            try:
                return float(value)
            except ValueError:
                pass
        raise ReplyShapeError(f"Expected a document score, got {value!r}", response)

    @staticmethod
    def _fields(value: ResponseType, response: ResponseType) -> Any:
        if isinstance(value, dict):
            mapping = dict(value)
        elif isinstance(value, list) and len(value) % 2 == 0:
            it = iter(value)
            mapping = dict(zip(it, it))
        else:
            raise ReplyShapeError(
                f"Expected a flat list of field/value pairs, got {value!r}", response
            )
        fields = EncodingInsensitiveDict(mapping)
        if Config.decode_json_documents and "$" in fields:
            try:
                document = json.loads(nativestr(fields["$"]))
            except ValueError as e:
                raise ReplyShapeError(
                    f"Expected a JSON document in the \"$\" field, got {fields['$']!r}",
                    response,
                ) from e
            if len(fields) == 1:
                return document
            # other returned fields are kept alongside the parsed document
            fields.pop("$")
            fields["$"] = document
        return fields
