from __future__ import annotations

import dataclasses
import math

from ._utils import counted_args
from .commands import Command
from .tokens import CommandName, PrefixToken, PureToken
from .typing import CommandArgList, Parameters, StringT, add_runtime_checks

#: The offset used when no limit is requested
DEFAULT_OFFSET = 0
#: The number of documents returned when no limit is requested
DEFAULT_COUNT = 10

DEFAULT_SUMMARIZE_SEPARATOR = "..."
DEFAULT_SUMMARIZE_LEN = 20
DEFAULT_SUMMARIZE_FRAGS = 3


@add_runtime_checks
def filter_value(value: int | float, exclusive: bool = False) -> str:
    """
    Formats a numeric bound for use in a ``FILTER`` clause

    :param value: The bound. ``math.inf`` and ``-math.inf`` render as
     ``+inf`` and ``-inf`` respectively.
    :param exclusive: Whether the bound itself is excluded from the range
     (rendered by prefixing the value with ``(``).
    """
    prefix = "(" if exclusive else ""
    if math.isinf(value):
        return f"{prefix}{'-' if value < 0 else '+'}inf"
    return f"{prefix}{value:f}"


@dataclasses.dataclass(frozen=True)
class QueryFilter:
    """
    A numeric range restriction on a single attribute.

    By default the range is unbounded (``-inf`` to ``+inf``)::

        QueryFilter("price").with_min_inclusive(10).with_max_exclusive(100)
    """

    #: The numeric attribute to filter on
    attribute: StringT
    #: The formatted lower bound
    min: str = filter_value(-math.inf)
    #: The formatted upper bound
    max: str = filter_value(math.inf)

    def with_min_inclusive(self, value: int | float) -> QueryFilter:
        return dataclasses.replace(self, min=filter_value(value))

    def with_min_exclusive(self, value: int | float) -> QueryFilter:
        return dataclasses.replace(self, min=filter_value(value, True))

    def with_max_inclusive(self, value: int | float) -> QueryFilter:
        return dataclasses.replace(self, max=filter_value(value))

    def with_max_exclusive(self, value: int | float) -> QueryFilter:
        return dataclasses.replace(self, max=filter_value(value, True))

    @property
    def args(self) -> CommandArgList:
        return [PrefixToken.FILTER, self.attribute, self.min, self.max]


@dataclasses.dataclass(frozen=True)
class QueryLimit:
    """
    The page of results to return
    """

    #: The number of documents to skip
    offset: int = DEFAULT_OFFSET
    #: The number of documents to return
    count: int = DEFAULT_COUNT

    @classmethod
    def default(cls) -> QueryLimit:
        return cls(DEFAULT_OFFSET, DEFAULT_COUNT)

    @property
    def is_default(self) -> bool:
        return self.offset == DEFAULT_OFFSET and self.count == DEFAULT_COUNT

    @property
    def args(self) -> CommandArgList:
        # the server applies the default page on its own
        if self.is_default:
            return []
        return [PrefixToken.LIMIT, self.offset, self.count]


@dataclasses.dataclass(frozen=True)
class QuerySummarize:
    """
    Summarization of the returned fields.

    :meth:`default` provides the values the server itself would use
    """

    #: The fields to summarize. All fields are summarized when empty.
    fields: tuple[StringT, ...] = ()
    #: The number of fragments to return
    frags: int = 0
    #: The length of each fragment (in words)
    length: int = 0
    #: The string used to separate fragments
    separator: StringT = ""

    @classmethod
    def default(cls) -> QuerySummarize:
        return cls(
            frags=DEFAULT_SUMMARIZE_FRAGS,
            length=DEFAULT_SUMMARIZE_LEN,
            separator=DEFAULT_SUMMARIZE_SEPARATOR,
        )

    def with_fields(self, fields: Parameters[StringT]) -> QuerySummarize:
        return dataclasses.replace(self, fields=tuple(fields))

    def add_field(self, field: StringT) -> QuerySummarize:
        return dataclasses.replace(self, fields=(*self.fields, field))

    def with_frags(self, frags: int) -> QuerySummarize:
        return dataclasses.replace(self, frags=frags)

    def with_length(self, length: int) -> QuerySummarize:
        return dataclasses.replace(self, length=length)

    def with_separator(self, separator: StringT) -> QuerySummarize:
        return dataclasses.replace(self, separator=separator)

    @property
    def args(self) -> CommandArgList:
        return [
            PureToken.SUMMARIZE,
            *counted_args(PrefixToken.FIELDS, self.fields),
            PrefixToken.FRAGS,
            self.frags,
            PrefixToken.LEN,
            self.length,
            PrefixToken.SEPARATOR,
            self.separator,
        ]


@dataclasses.dataclass(frozen=True)
class QueryHighlight:
    """
    Highlighting of matched terms in the returned fields
    """

    #: The fields to highlight. All fields are highlighted when empty.
    fields: tuple[StringT, ...] = ()
    #: The string inserted before each highlighted term
    open_tag: StringT = ""
    #: The string inserted after each highlighted term
    close_tag: StringT = ""

    def with_fields(self, fields: Parameters[StringT]) -> QueryHighlight:
        return dataclasses.replace(self, fields=tuple(fields))

    def add_field(self, field: StringT) -> QueryHighlight:
        return dataclasses.replace(self, fields=(*self.fields, field))

    def with_tags(self, open_tag: StringT, close_tag: StringT) -> QueryHighlight:
        """
        Sets the open and close tags. Both should either be set or empty;
        this is not checked and the server will reject a mismatched pair.
        """
        return dataclasses.replace(self, open_tag=open_tag, close_tag=close_tag)

    @property
    def args(self) -> CommandArgList:
        args: CommandArgList = [PureToken.HIGHLIGHT]
        args += counted_args(PrefixToken.FIELDS, self.fields)
        if self.open_tag or self.close_tag:
            args += [PrefixToken.TAGS, self.open_tag, self.close_tag]
        return args


@dataclasses.dataclass(frozen=True)
class QueryOptions:
    """
    A search request for `FT.SEARCH <https://redis.io/commands/ft.search/>`__

    Instances are immutable and every ``with_*`` / ``add_*`` method returns
    an updated copy::

        query = (
            QueryOptions("idx", "@title:hello")
            .include_scores()
            .add_filter(QueryFilter("price").with_max_inclusive(100))
            .with_limit(0, 50)
        )
    """

    #: The index to search
    index: StringT = ""
    #: The query (in the RediSearch query syntax)
    query_string: StringT = ""
    #: Only return document ids, not their contents
    no_content: bool = False
    #: Don't expand query terms using stemming
    verbatim: bool = False
    #: Don't filter stop words from the query
    no_stopwords: bool = False
    #: Return the relative score of each document
    with_scores: bool = False
    #: Numeric filters, applied in order
    filters: tuple[QueryFilter, ...] = ()
    #: Limit the fields returned for each document
    return_fields: tuple[StringT, ...] = ()
    #: Summarization of returned fields
    summarize: QuerySummarize | None = None
    #: Highlighting of returned fields
    highlight: QueryHighlight | None = None
    #: Number of intervening terms allowed between phrase terms.
    #: ``None`` leaves the clause out (``0`` is a valid slop).
    slop: int | None = None
    #: Require phrase terms to appear in the same order as the query
    in_order: bool = False
    #: The language to use for stemming query terms
    language: StringT | None = None
    #: Limit the search to these document keys
    in_keys: tuple[StringT, ...] = ()
    #: Limit the search to these attributes
    in_fields: tuple[StringT, ...] = ()
    #: Return an explanation of each document's score
    explain_score: bool = False
    #: The page of results to return
    limit: QueryLimit = QueryLimit()

    def with_index(self, index: StringT) -> QueryOptions:
        return dataclasses.replace(self, index=index)

    def with_query_string(self, query_string: StringT) -> QueryOptions:
        return dataclasses.replace(self, query_string=query_string)

    def with_no_content(self, value: bool = True) -> QueryOptions:
        return dataclasses.replace(self, no_content=value)

    def with_verbatim(self, value: bool = True) -> QueryOptions:
        return dataclasses.replace(self, verbatim=value)

    def with_no_stopwords(self, value: bool = True) -> QueryOptions:
        return dataclasses.replace(self, no_stopwords=value)

    def include_scores(self, value: bool = True) -> QueryOptions:
        return dataclasses.replace(self, with_scores=value)

    def with_in_order(self, value: bool = True) -> QueryOptions:
        return dataclasses.replace(self, in_order=value)

    def with_explain_score(self, value: bool = True) -> QueryOptions:
        return dataclasses.replace(self, explain_score=value)

    def with_filters(self, filters: Parameters[QueryFilter]) -> QueryOptions:
        return dataclasses.replace(self, filters=tuple(filters))

    def add_filter(self, query_filter: QueryFilter) -> QueryOptions:
        return dataclasses.replace(self, filters=(*self.filters, query_filter))

    def with_return_fields(self, fields: Parameters[StringT]) -> QueryOptions:
        return dataclasses.replace(self, return_fields=tuple(fields))

    def add_return_field(self, field: StringT) -> QueryOptions:
        return dataclasses.replace(self, return_fields=(*self.return_fields, field))

    def with_summarize(self, summarize: QuerySummarize | None) -> QueryOptions:
        return dataclasses.replace(self, summarize=summarize)

    def with_highlight(self, highlight: QueryHighlight | None) -> QueryOptions:
        return dataclasses.replace(self, highlight=highlight)

    def with_slop(self, slop: int | None) -> QueryOptions:
        return dataclasses.replace(self, slop=slop)

    def with_language(self, language: StringT) -> QueryOptions:
        return dataclasses.replace(self, language=language)

    def with_in_keys(self, keys: Parameters[StringT]) -> QueryOptions:
        return dataclasses.replace(self, in_keys=tuple(keys))

    def add_key(self, key: StringT) -> QueryOptions:
        return dataclasses.replace(self, in_keys=(*self.in_keys, key))

    def with_in_fields(self, fields: Parameters[StringT]) -> QueryOptions:
        return dataclasses.replace(self, in_fields=tuple(fields))

    def add_field(self, field: StringT) -> QueryOptions:
        return dataclasses.replace(self, in_fields=(*self.in_fields, field))

    def with_limit(self, offset: int, count: int) -> QueryOptions:
        return dataclasses.replace(self, limit=QueryLimit(offset, count))

    @property
    def stride(self) -> int:
        """
        The number of reply elements the server emits per document
        for this query: the key, the content and, optionally, the
        score and the score explanation.
        """
        count = 2
        if self.with_scores:
            count += 1
        if self.explain_score:
            count += 1
        if self.no_content:
            count -= 1
        return count

    @property
    def args(self) -> CommandArgList:
        """
        The arguments that follow the index name and query string in ``FT.SEARCH``
        """
        pieces: CommandArgList = []
        if self.no_content:
            pieces.append(PureToken.NOCONTENT)
        if self.verbatim:
            pieces.append(PureToken.VERBATIM)
        if self.no_stopwords:
            pieces.append(PureToken.NOSTOPWORDS)
        if self.with_scores:
            pieces.append(PureToken.WITHSCORES)
        for query_filter in self.filters:
            pieces += query_filter.args
        pieces += counted_args(PrefixToken.RETURN, self.return_fields)
        if self.summarize is not None:
            pieces += self.summarize.args
        if self.highlight is not None:
            pieces += self.highlight.args
        if self.slop is not None:
            pieces += [PrefixToken.SLOP, self.slop]
        if self.in_order:
            pieces.append(PureToken.INORDER)
        if self.language:
            pieces += [PrefixToken.LANGUAGE, self.language]
        pieces += counted_args(PrefixToken.INKEYS, self.in_keys)
        pieces += counted_args(PrefixToken.INFIELDS, self.in_fields)
        if self.explain_score:
            pieces.append(PureToken.EXPLAINSCORE)
        pieces += self.limit.args
        return pieces


@add_runtime_checks
def search_command(options: QueryOptions) -> Command:
    """
    Builds the ``FT.SEARCH`` command for :paramref:`options`
    """
    return Command(
        CommandName.FT_SEARCH, (options.index, options.query_string, *options.args)
    )
