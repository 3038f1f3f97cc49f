from __future__ import annotations

import datetime

from wrapt import ObjectProxy

from ftsearch.typing import (
    Any,
    CommandArgList,
    Iterable,
    Mapping,
    ResponseType,
    StringT,
    ValueT,
)


class EncodingInsensitiveDict(ObjectProxy):  # type: ignore
    """
    Proxy around the mapping of fields returned for a document which allows
    looking up a field by either its ``str`` or ``bytes`` name, irrespective
    of whether the transport decoded the response.
    """

    def __init__(
        self,
        mapping: Mapping[Any, Any] | None = None,
        encoding: str = "utf-8",
    ):
        super().__init__(mapping if mapping is not None else {})
        self._self_encoding = encoding

    def _self_alternate(self, item: Any) -> Any:
        if isinstance(item, str):
            return item.encode(self._self_encoding)
        if isinstance(item, bytes):
            return item.decode(self._self_encoding)
        return item

    def __getitem__(self, item: StringT) -> Any:
        if item not in self.__wrapped__:
            alternate = self._self_alternate(item)
            if alternate in self.__wrapped__:
                return self.__wrapped__[alternate]
        return self.__wrapped__[item]

    def get(self, item: StringT, default: object | None = None) -> Any:
        try:
            return self[item]
        except KeyError:
            return default

    def pop(self, item: StringT, default: object | None = None) -> Any:
        if item not in self.__wrapped__:
            item = self._self_alternate(item)
        return self.__wrapped__.pop(item, default)

    def __contains__(self, key: StringT) -> bool:
        return key in self.__wrapped__ or self._self_alternate(key) in self.__wrapped__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EncodingInsensitiveDict):
            other = other.__wrapped__
        return bool(self.__wrapped__ == other)

    def __repr__(self) -> str:
        return repr(self.__wrapped__)


def nativestr(x: ResponseType, encoding: str = "utf-8") -> str:
    return x if isinstance(x, str) else x.decode(encoding, "replace")  # type: ignore


def counted_args(name: ValueT, values: Iterable[ValueT]) -> CommandArgList:
    """
    Renders ``name count v1 .. vn`` for a non empty sequence of values,
    and nothing for an empty one.
    """
    _values: CommandArgList = list(values)
    if not _values:
        return []
    return [name, len(_values), *_values]


def normalized_seconds(value: int | datetime.timedelta) -> int:
    if isinstance(value, datetime.timedelta):
        value = value.seconds + value.days * 24 * 3600

    return value
