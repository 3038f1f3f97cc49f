from __future__ import annotations

import dataclasses

from ftsearch.tokens import CommandName
from ftsearch.typing import ValueT


@dataclasses.dataclass(frozen=True)
class Command:
    """
    A fully serialized command: the command name and the positional
    arguments in the order the server expects them.
    """

    #: The name of the command (for example ``FT.SEARCH``)
    name: CommandName
    #: The arguments following the command name
    arguments: tuple[ValueT, ...] = ()

    @property
    def tokens(self) -> tuple[ValueT, ...]:
        """
        The command name followed by all arguments
        """
        return (self.name, *self.arguments)

    def __str__(self) -> str:
        # no quoting is applied, so this is not necessarily valid redis-cli input
        return " ".join(
            token.decode("latin-1") if isinstance(token, bytes) else str(token)
            for token in self.tokens
        )
