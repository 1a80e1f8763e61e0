"""
Service Router - PRR Platform
prr/routers/services.py

Find-or-create and list reviewed services.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from prr.config import settings
from prr.core.dependencies import get_service_repository
from prr.models.catalog import Service, ServiceCreate
from prr.repositories.service_repository import ServiceRepository

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/services", tags=["Services"])


@router.post(
    "",
    response_model=Service,
    status_code=status.HTTP_201_CREATED,
    summary="Find or create a service by name",
)
async def find_or_create_service(
    payload: ServiceCreate,
    response: Response,
    repo: ServiceRepository = Depends(get_service_repository),
) -> Service:
    service, created = repo.find_or_create(payload.name)
    if not created:
        response.status_code = status.HTTP_200_OK
    return service


@router.get("", response_model=List[Service], summary="List services")
async def list_services(
    repo: ServiceRepository = Depends(get_service_repository),
) -> List[Service]:
    return repo.list_all()
