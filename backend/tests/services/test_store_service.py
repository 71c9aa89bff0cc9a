"""Store Service — create_store with and without injected collaborators.

Invariants:
    - Invalid requests raise StoreValidationError before any collaborator is touched
    - Duplicate names => DuplicateStoreError; locked / unknown manager => 423 / 422 errors
    - Manager lookup skipped when the owner manages the store
    - Successful creation returns a fresh id and UTC timestamp, inserted when a repository exists
"""

from datetime import timezone
from uuid import UUID

import pytest

from ourzhop.core.domain_types import ManagerStatus
from ourzhop.core.errors import (
    DuplicateStoreError,
    ManagerLockedError,
    ManagerNotFoundError,
    StoreValidationError,
)
from ourzhop.core.store_request import CreateStoreRequest
from ourzhop.services.store_service import StoreService


async def test_create_store_without_collaborators(valid_request):
    created = await StoreService().create_store(valid_request)
    assert isinstance(created.store_id, UUID)
    assert created.store_name == "Green Basket"
    assert created.created_at.tzinfo == timezone.utc


async def test_each_creation_gets_a_fresh_id(valid_request):
    service = StoreService()
    first = await service.create_store(valid_request)
    second = await service.create_store(valid_request)
    assert first.store_id != second.store_id


async def test_invalid_request_raises_with_every_violation(
    store_repository, manager_directory,
):
    service = StoreService(store_repository, manager_directory)
    with pytest.raises(StoreValidationError) as exc_info:
        await service.create_store(CreateStoreRequest())
    assert list(exc_info.value.details) == [
        "basic_information",
        "location",
        "operational_hours",
        "tax_and_payment",
        "delivery_configuration",
    ]
    assert store_repository.inserted == []
    assert manager_directory.lookups == []


async def test_duplicate_store_name_rejected(
    valid_request, store_repository, manager_directory,
):
    store_repository.existing_names.add("Green Basket")
    service = StoreService(store_repository, manager_directory)
    with pytest.raises(DuplicateStoreError):
        await service.create_store(valid_request)
    assert store_repository.inserted == []
    assert manager_directory.lookups == []


@pytest.mark.parametrize("status, error", [
    (ManagerStatus.LOCKED, ManagerLockedError),
    (ManagerStatus.NOT_FOUND, ManagerNotFoundError),
])
async def test_unverified_manager_rejected(
    valid_request, store_repository, manager_directory, status, error,
):
    manager_directory.statuses["mgr-1024"] = status
    service = StoreService(store_repository, manager_directory)
    with pytest.raises(error):
        await service.create_store(valid_request)
    assert store_repository.inserted == []


async def test_manager_lookup_skipped_when_owner_manages(
    valid_request, store_repository, manager_directory,
):
    valid_request.basic_information.is_manager_same_as_owner = True
    service = StoreService(store_repository, manager_directory)
    await service.create_store(valid_request)
    assert manager_directory.lookups == []


async def test_successful_creation_is_inserted(
    valid_request, store_repository, manager_directory,
):
    service = StoreService(store_repository, manager_directory)
    created = await service.create_store(valid_request)
    assert manager_directory.lookups == ["mgr-1024"]
    assert store_repository.inserted == [
        (created.store_id, valid_request, created.created_at),
    ]
