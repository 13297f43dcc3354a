from __future__ import annotations

from typing import Any, Protocol, Sequence


class SQLStorePort(Protocol):
    def query(self, sql: str, parameters: Sequence[Any] = ()) -> list[dict]: ...
