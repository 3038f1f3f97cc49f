from __future__ import annotations

from collections.abc import (
    Awaitable,
    Callable,
    Iterable,
    Iterator,
    Mapping,
    Sequence,
    Set,
    ValuesView,
)
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Literal,
    ParamSpec,
    Protocol,
    TypeVar,
    Union,
)

import beartype
from typing_extensions import Self

from ftsearch.config import Config

RUNTIME_TYPECHECKS = Config.runtime_checks and not TYPE_CHECKING

P = ParamSpec("P")
T_co = TypeVar("T_co", covariant=True)
R = TypeVar("R")


def add_runtime_checks(func: Callable[P, R]) -> Callable[P, R]:
    if RUNTIME_TYPECHECKS and not TYPE_CHECKING:
        return beartype.beartype(func)

    return func


#: The canonical type used for input parameters that represent "strings"
#: that are transmitted to redis.
StringT = str | bytes

#: Represents the different python primitives that are accepted
#: as command arguments. These are encoded by the transport before
#: being transmitted.
ValueT = str | bytes | int | float

#: An ordered list of command arguments ready to be handed to the transport
CommandArgList = list[ValueT]

#: Restricted union of container types accepted by builder methods that take
#: a variable number of values (fields, keys, prefixes, stop words). Unlike
#: :class:`typing.Iterable` this does not accept a bare :class:`str`
#: or :class:`bytes`, which would otherwise be split into characters.
Parameters = list[T_co] | Set[T_co] | tuple[T_co, ...] | ValuesView[T_co] | Iterator[T_co]

#: Primitives returned by redis
ResponsePrimitive = StringT | int | float | bool | None

if TYPE_CHECKING:
    ResponseType = (
        ResponsePrimitive
        | list["ResponseType"]
        | dict[ResponsePrimitive, "ResponseType"]
        | BaseException  # response errors get mapped to exceptions.
    )
else:
    ResponseType = (
        ResponsePrimitive | list[Any] | dict[ResponsePrimitive, Any] | BaseException
    )

__all__ = [
    "Any",
    "Awaitable",
    "Callable",
    "CommandArgList",
    "Generic",
    "Iterable",
    "Iterator",
    "Literal",
    "Mapping",
    "Parameters",
    "Protocol",
    "ResponsePrimitive",
    "ResponseType",
    "Self",
    "Sequence",
    "StringT",
    "TypeVar",
    "Union",
    "ValueT",
    "TYPE_CHECKING",
    "RUNTIME_TYPECHECKS",
]
