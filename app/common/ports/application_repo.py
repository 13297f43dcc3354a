from __future__ import annotations

from typing import Protocol


class ApplicationRepositoryPort(Protocol):
    def create(self, username: str, job_id: int) -> dict: ...

    def job_ids_for(self, username: str) -> list[int]: ...
