"""Boundary Protocols — contracts between the store service and its collaborators.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Persistence and manager lookups are reached only through these Protocols
    - No implementation ships with the service; callers inject one or the step is skipped

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async methods: implementations do IO; the validation core never calls them
"""

from datetime import datetime
from typing import Protocol

from ourzhop.core.domain_types import ManagerStatus, StoreId
from ourzhop.core.store_request import CreateStoreRequest


class StoreRepository(Protocol):
    """Contract for store persistence, implemented by shell."""
    async def exists_by_name(self, store_name: str) -> bool: ...
    async def insert(
        self, store_id: StoreId, request: CreateStoreRequest, created_at: datetime,
    ) -> None: ...


class ManagerDirectory(Protocol):
    """Contract for manager-account verification, implemented by shell."""
    async def verify_manager(self, manager_id: str) -> ManagerStatus: ...
