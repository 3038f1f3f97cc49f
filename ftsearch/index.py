from __future__ import annotations

import dataclasses
import enum
from datetime import timedelta

from ._utils import counted_args, normalized_seconds
from .commands import Command
from .tokens import CommandName, PrefixToken, PureToken
from .typing import (
    CommandArgList,
    Parameters,
    Self,
    StringT,
    Union,
    add_runtime_checks,
)


class StorageType(enum.Enum):
    """
    The type of redis key an index is built over
    """

    HASH = PureToken.HASH
    JSON = PureToken.JSON


@dataclasses.dataclass(frozen=True)
class _Attribute:
    #: Name of the field. For hashes, this is a field name within the hash.
    #:  For JSON, this is a JSON Path expression.
    name: StringT
    #: Defines the alias associated to :paramref:`name`.
    #: For example, you can use this feature to alias a complex
    #: JSONPath expression with more memorable (and easier to type) name.
    alias: StringT | None = None
    #: Whether to optimize for sorting.
    sortable: bool = False
    #: Whether to use the unnormalized form of the field for sorting.
    #: Only rendered when :paramref:`sortable` is set.
    unnormalized: bool = False
    #: Skip indexing this field (it can still be used for sorting).
    no_index: bool = False

    def as_alias(self, alias: StringT) -> Self:
        return dataclasses.replace(self, alias=alias)

    def with_sortable(self, sortable: bool = True, unnormalized: bool = False) -> Self:
        return dataclasses.replace(self, sortable=sortable, unnormalized=unnormalized)

    def with_no_index(self, no_index: bool = True) -> Self:
        return dataclasses.replace(self, no_index=no_index)


@dataclasses.dataclass(frozen=True)
class TextAttribute(_Attribute):
    """
    A full text field in the index schema
    """

    #: Whether to disable stemming for this field.
    no_stem: bool = False
    #: Weight of this field in the document's ranking. ``0`` leaves
    #: the server default (1.0) in place.
    weight: float = 0
    #: Phonetic algorithm to use for this field (for example ``dm:en``)
    phonetic: StringT | None = None

    def with_weight(self, weight: float) -> TextAttribute:
        return dataclasses.replace(self, weight=weight)

    def with_phonetic(self, phonetic: StringT) -> TextAttribute:
        return dataclasses.replace(self, phonetic=phonetic)

    def with_no_stem(self, no_stem: bool = True) -> TextAttribute:
        return dataclasses.replace(self, no_stem=no_stem)


@dataclasses.dataclass(frozen=True)
class TagAttribute(_Attribute):
    """
    A tag field in the index schema
    """

    #: Separator used for splitting the value into tags. The server default is ``,``.
    separator: StringT | None = None
    #: Keeps the original letter cases of the tags. If not specified,
    #: the characters are converted to lowercase.
    case_sensitive: bool = False

    def with_separator(self, separator: StringT) -> TagAttribute:
        return dataclasses.replace(self, separator=separator)

    def with_case_sensitive(self, case_sensitive: bool = True) -> TagAttribute:
        return dataclasses.replace(self, case_sensitive=case_sensitive)


@dataclasses.dataclass(frozen=True)
class NumericAttribute(_Attribute):
    """
    A numeric field in the index schema. Numeric fields are
    never normalized so :attr:`unnormalized` is ignored.
    """


#: A single field declaration in an index schema
SchemaAttribute = Union[TextAttribute, TagAttribute, NumericAttribute]


def _sortable_args(attribute: SchemaAttribute, normalizable: bool = True) -> CommandArgList:
    args: CommandArgList = []
    if attribute.sortable:
        args.append(PureToken.SORTABLE)
        if normalizable and attribute.unnormalized:
            args.append(PureToken.UNF)
    if attribute.no_index:
        args.append(PureToken.NOINDEX)
    return args


@add_runtime_checks
def attribute_args(attribute: SchemaAttribute) -> CommandArgList:
    """
    Renders a schema attribute as
    ``<name> [AS alias] <type> [type options] [SORTABLE [UNF]] [NOINDEX]``
    """
    if not isinstance(attribute, (TextAttribute, TagAttribute, NumericAttribute)):
        raise TypeError(f"Unsupported schema attribute: {attribute!r}")
    args: CommandArgList = [attribute.name]
    if attribute.alias:
        args += [PrefixToken.AS, attribute.alias]

    if isinstance(attribute, TextAttribute):
        args.append(PureToken.TEXT)
        if attribute.no_stem:
            args.append(PureToken.NOSTEM)
        if attribute.weight:
            args += [PrefixToken.WEIGHT, attribute.weight]
        if attribute.phonetic:
            args += [PrefixToken.PHONETIC, attribute.phonetic]
        args += _sortable_args(attribute)
    elif isinstance(attribute, TagAttribute):
        args.append(PureToken.TAG)
        if attribute.separator:
            args += [PrefixToken.SEPARATOR, attribute.separator]
        if attribute.case_sensitive:
            args.append(PureToken.CASESENSITIVE)
        args += _sortable_args(attribute)
    elif isinstance(attribute, NumericAttribute):
        args.append(PureToken.NUMERIC)
        args += _sortable_args(attribute, normalizable=False)
    return args


@dataclasses.dataclass(frozen=True)
class IndexOptions:
    """
    Options for creating an index with
    `FT.CREATE <https://redis.io/commands/ft.create/>`__

    Instances are immutable. Every ``with_*`` / ``add_*`` method returns
    an updated copy so that options can be chained::

        options = (
            IndexOptions()
            .on_json()
            .with_prefixes(["doc:"])
            .add_attribute(TextAttribute("$.title", alias="title"))
        )
    """

    #: The type of redis key to index.
    on: StorageType = StorageType.HASH
    #: Key prefixes to index. All keys are indexed when empty.
    prefixes: tuple[StringT, ...] = ()
    #: A filter expression applied to keys before indexing them.
    filter_expression: StringT | None = None
    #: The default language to use for text fields.
    language: StringT | None = None
    #: A document attribute holding the language of the document.
    language_field: StringT | None = None
    #: The default score of documents. ``None`` leaves the clause out.
    score: float | None = 1.0
    #: A document attribute holding the score of the document.
    score_field: StringT | None = None
    #: Allow more than 32 text attributes in the schema.
    max_text_fields: bool = False
    #: Don't store term offsets (this also disables highlighting).
    no_offsets: bool = False
    #: Seconds of inactivity after which the index expires.
    temporary: int | timedelta | None = None
    #: Don't store the data required for highlighting.
    no_highlight: bool = False
    #: Don't store attribute bits for each term.
    no_fields: bool = False
    #: Don't store term frequencies.
    no_freqs: bool = False
    #: Custom stop words. ``None`` keeps the server's defaults while an
    #: empty tuple disables stop words.
    stopwords: tuple[StringT, ...] | None = None
    #: Don't scan existing keys when the index is created.
    skip_initial_scan: bool = False
    #: The ordered schema attributes
    schema: tuple[SchemaAttribute, ...] = ()

    def on_hash(self) -> IndexOptions:
        return dataclasses.replace(self, on=StorageType.HASH)

    def on_json(self) -> IndexOptions:
        return dataclasses.replace(self, on=StorageType.JSON)

    def with_prefixes(self, prefixes: Parameters[StringT]) -> IndexOptions:
        return dataclasses.replace(self, prefixes=tuple(prefixes))

    def add_prefix(self, prefix: StringT) -> IndexOptions:
        return dataclasses.replace(self, prefixes=(*self.prefixes, prefix))

    def with_filter(self, expression: StringT) -> IndexOptions:
        return dataclasses.replace(self, filter_expression=expression)

    def with_language(self, language: StringT) -> IndexOptions:
        return dataclasses.replace(self, language=language)

    def with_language_field(self, field: StringT) -> IndexOptions:
        return dataclasses.replace(self, language_field=field)

    def with_score(self, score: float | None) -> IndexOptions:
        return dataclasses.replace(self, score=score)

    def with_score_field(self, field: StringT) -> IndexOptions:
        return dataclasses.replace(self, score_field=field)

    def with_max_text_fields(self, value: bool = True) -> IndexOptions:
        return dataclasses.replace(self, max_text_fields=value)

    def with_no_offsets(self, value: bool = True) -> IndexOptions:
        return dataclasses.replace(self, no_offsets=value)

    def with_temporary(self, seconds: int | timedelta) -> IndexOptions:
        return dataclasses.replace(self, temporary=seconds)

    def with_no_highlight(self, value: bool = True) -> IndexOptions:
        return dataclasses.replace(self, no_highlight=value)

    def with_no_fields(self, value: bool = True) -> IndexOptions:
        return dataclasses.replace(self, no_fields=value)

    def with_no_freqs(self, value: bool = True) -> IndexOptions:
        return dataclasses.replace(self, no_freqs=value)

    def with_stopwords(self, stopwords: Parameters[StringT] | None) -> IndexOptions:
        """
        :param stopwords: the stop words to use. An empty sequence disables
         stop words, ``None`` restores the server defaults.
        """
        return dataclasses.replace(
            self, stopwords=tuple(stopwords) if stopwords is not None else None
        )

    def add_stopword(self, stopword: StringT) -> IndexOptions:
        return dataclasses.replace(self, stopwords=(*(self.stopwords or ()), stopword))

    def with_skip_initial_scan(self, value: bool = True) -> IndexOptions:
        return dataclasses.replace(self, skip_initial_scan=value)

    def with_schema(self, attributes: Parameters[SchemaAttribute]) -> IndexOptions:
        return dataclasses.replace(self, schema=tuple(attributes))

    def add_attribute(self, attribute: SchemaAttribute) -> IndexOptions:
        return dataclasses.replace(self, schema=(*self.schema, attribute))

    @property
    def args(self) -> CommandArgList:
        """
        The arguments that follow the index name in ``FT.CREATE``
        """
        pieces: CommandArgList = [PrefixToken.ON, self.on.value]
        pieces += counted_args(PrefixToken.PREFIX, self.prefixes)
        if self.filter_expression:
            pieces += [PrefixToken.FILTER, self.filter_expression]
        if self.language:
            pieces += [PrefixToken.LANGUAGE, self.language]
        if self.language_field:
            pieces += [PrefixToken.LANGUAGE_FIELD, self.language_field]
        if self.score is not None:
            pieces += [PrefixToken.SCORE, self.score]
        if self.score_field:
            pieces += [PrefixToken.SCORE_FIELD, self.score_field]
        if self.max_text_fields:
            pieces.append(PureToken.MAXTEXTFIELDS)
        if self.no_offsets:
            pieces.append(PureToken.NOOFFSETS)
        if self.temporary is not None:
            pieces += [PrefixToken.TEMPORARY, normalized_seconds(self.temporary)]
        # highlighting needs offsets so NOOFFSETS already implies NOHL
        if self.no_highlight and not self.no_offsets:
            pieces.append(PureToken.NOHL)
        if self.no_fields:
            pieces.append(PureToken.NOFIELDS)
        if self.no_freqs:
            pieces.append(PureToken.NOFREQS)
        if self.stopwords is not None:
            pieces += [PrefixToken.STOPWORDS, len(self.stopwords), *self.stopwords]
        if self.skip_initial_scan:
            pieces.append(PureToken.SKIPINITIALSCAN)

        pieces.append(PureToken.SCHEMA)
        for attribute in self.schema:
            pieces += attribute_args(attribute)
        return pieces


@dataclasses.dataclass(frozen=True)
class DropIndexOptions:
    """
    Options for `FT.DROPINDEX <https://redis.io/commands/ft.dropindex/>`__
    """

    #: The name of the index to drop
    index: StringT
    #: Also delete the documents (keys) that were indexed
    delete_documents: bool = False

    def with_delete_documents(self, value: bool = True) -> DropIndexOptions:
        return dataclasses.replace(self, delete_documents=value)

    @property
    def args(self) -> CommandArgList:
        pieces: CommandArgList = [self.index]
        if self.delete_documents:
            pieces.append(PureToken.DELETE_DOCS)
        return pieces


@add_runtime_checks
def create_index_command(index: StringT, options: IndexOptions) -> Command:
    """
    Builds the ``FT.CREATE`` command for :paramref:`index`

    No validation is performed; invalid options are rejected by the server.
    """
    return Command(CommandName.FT_CREATE, (index, *options.args))


@add_runtime_checks
def drop_index_command(index: StringT, delete_documents: bool = False) -> Command:
    """
    Builds the ``FT.DROPINDEX`` command for :paramref:`index`
    """
    return Command(
        CommandName.FT_DROPINDEX, tuple(DropIndexOptions(index, delete_documents).args)
    )
