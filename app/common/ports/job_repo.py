from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from job.domain.filters import JobFilter


class JobRepositoryPort(Protocol):
    def create(self, data: Mapping[str, Any]) -> dict: ...

    def find_all(self) -> list[dict]: ...

    def filter_by(self, filters: Sequence[JobFilter]) -> list[dict]: ...

    def get(self, job_id: int) -> dict: ...

    def update(self, job_id: int, data: Mapping[str, Any]) -> dict: ...

    def remove(self, job_id: int) -> None: ...
