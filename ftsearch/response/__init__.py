from __future__ import annotations

from .types import QueryResult, QueryResults

__all__ = ["QueryResult", "QueryResults"]
