from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from company.domain.filters import CompanyFilter


class CompanyRepositoryPort(Protocol):
    def create(self, data: Mapping[str, Any]) -> dict: ...

    def find_all(self) -> list[dict]: ...

    def filter_by(self, filters: Sequence[CompanyFilter]) -> list[dict]: ...

    def get(self, handle: str) -> dict: ...

    def update(self, handle: str, data: Mapping[str, Any]) -> dict: ...

    def remove(self, handle: str) -> None: ...
