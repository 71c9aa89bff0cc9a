"""Store Service — validates a create-store request and issues the new store's identity.

Invariants:
    - Validation runs first; nothing downstream sees an invalid request
    - Every violation is reported at once via StoreValidationError(details=path → message)
    - Collaborators (repository, manager directory) are optional; when absent the step is skipped
    - Store id is generated here (uuid4), never by the core

Design Decisions:
    - Impureim sandwich: pure validate_create_store_request in the middle, async IO around it
    - Collaborators injected via constructor: routes pass what the deployment provides,
      tests pass fakes
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from ourzhop.core.domain_types import ManagerStatus, StoreId
from ourzhop.core.errors import (
    DuplicateStoreError,
    ErrorContext,
    ManagerLockedError,
    ManagerNotFoundError,
    StoreValidationError,
)
from ourzhop.core.repository_protocols import ManagerDirectory, StoreRepository
from ourzhop.core.store_request import CreateStoreRequest
from ourzhop.core.validate_store import validate_create_store_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreCreated:
    store_id: StoreId
    store_name: str
    created_at: datetime


class StoreService:
    """Create-store use case."""

    def __init__(
        self,
        repository: StoreRepository | None = None,
        managers: ManagerDirectory | None = None,
    ):
        self._repository = repository
        self._managers = managers

    async def create_store(self, request: CreateStoreRequest) -> StoreCreated:
        violations = validate_create_store_request(request)
        if violations is not None:
            logger.warning(
                "Create-store request rejected",
                extra={"violation_count": len(violations)},
            )
            raise StoreValidationError(violations.errors)

        # Validation guarantees basic_information is present from here on
        basic = request.basic_information
        await self._check_duplicate(basic.store_name)
        if not basic.is_manager_same_as_owner:
            await self._check_manager(basic.shop_manager_id, basic.store_name)

        store_id = StoreId(uuid.uuid4())
        created_at = datetime.now(timezone.utc)
        if self._repository is not None:
            await self._repository.insert(store_id, request, created_at)

        logger.info(
            f"Store created: {basic.store_name}",
            extra={"store_id": str(store_id)},
        )
        return StoreCreated(
            store_id=store_id, store_name=basic.store_name, created_at=created_at,
        )

    async def _check_duplicate(self, store_name: str) -> None:
        if self._repository is None:
            return
        if await self._repository.exists_by_name(store_name):
            raise DuplicateStoreError(
                store_name, ErrorContext(store_name=store_name),
            )

    async def _check_manager(self, manager_id: str, store_name: str) -> None:
        if self._managers is None:
            return
        status = await self._managers.verify_manager(manager_id)
        if status == ManagerStatus.LOCKED:
            raise ManagerLockedError(manager_id, ErrorContext(store_name=store_name))
        if status == ManagerStatus.NOT_FOUND:
            raise ManagerNotFoundError(manager_id, ErrorContext(store_name=store_name))
