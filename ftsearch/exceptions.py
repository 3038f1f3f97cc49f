from __future__ import annotations

from ftsearch.typing import ResponseType


class FTSearchError(Exception):
    """
    Base exception from which all exceptions raised by ftsearch
    derive from.

    Errors raised by the transport (for example
    :class:`coredis.exceptions.ResponseError` for server side command errors or
    :class:`coredis.exceptions.ConnectionError`) are not wrapped and propagate
    unchanged.
    """


class ReplyShapeError(FTSearchError):
    """
    Raised when a reply does not have the shape implied by the options
    used to issue the command (for example a ``FT.SEARCH`` reply whose length
    does not match the number of elements expected per document).
    """

    def __init__(self, message: str, reply: ResponseType = None) -> None:
        self.reply = reply
        super().__init__(message)
