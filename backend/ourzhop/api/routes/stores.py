"""Stores — create-store endpoint.

Invariants:
    - Body decoded by CreateStoreRequestBody (types only); field rules run in the service
    - Success => 201 with {"status": "success", "message", "data": {store_id, store_name, created_at}}
    - Failures raise OurzhopError subclasses; error_handlers.py shapes the response

Design Decisions:
    - StoreService provided via Depends(get_store_service): deployments wire collaborators
      in one place, tests override the dependency
"""

import logging

from fastapi import APIRouter, Depends, status

from ourzhop.schemas.store import CreateStoreRequestBody, CreateStoreResponse, StoreData
from ourzhop.services.store_service import StoreService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/stores", tags=["stores"])


def get_store_service() -> StoreService:
    """No repository or manager directory is wired yet."""
    return StoreService()


@router.post(
    "", response_model=CreateStoreResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_store(
    body: CreateStoreRequestBody,
    service: StoreService = Depends(get_store_service),
):
    """Validate and create a store."""
    created = await service.create_store(body.to_domain())
    return CreateStoreResponse(
        data=StoreData(
            store_id=created.store_id,
            store_name=created.store_name,
            created_at=created.created_at,
        ),
    )
