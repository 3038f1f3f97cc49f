from __future__ import annotations

import os

_TRUTHY = ["1", "true", "t"]


class __Config:
    def __init__(self) -> None:
        self.__decode_json_documents: bool | None = None

    @property
    def runtime_checks(self) -> bool:
        """
        Whether runtime type checks are to be enabled.
        Can be enabled by setting the environment variable ``FTSEARCH_RUNTIME_CHECKS`` to ``true``
        """
        return os.environ.get("FTSEARCH_RUNTIME_CHECKS", "").lower() in _TRUTHY

    @property
    def decode_json_documents(self) -> bool:
        """
        Whether documents returned from ``ON JSON`` indexes (as a single ``$`` field)
        are parsed into python objects when search results are decoded.
        Enabled by default. This can be disabled in any of the following ways:

          - By setting the environment variable ``FTSEARCH_DECODE_JSON`` to ``false``
          - By explicitly setting ``ftsearch.Config.decode_json_documents = False``

        """
        if self.__decode_json_documents is not None:
            return self.__decode_json_documents
        return os.environ.get("FTSEARCH_DECODE_JSON", "true").lower() in _TRUTHY

    @decode_json_documents.setter
    def decode_json_documents(self, value: bool | None) -> None:
        self.__decode_json_documents = value


#: Used to configure global behaviors of the ftsearch library
Config = __Config()
