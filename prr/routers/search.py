"""
Search Router - PRR Platform
prr/routers/search.py

Service search by name, joined with each service's newest submission.
"""

from typing import List

import structlog
from fastapi import APIRouter, Depends, Query

from prr.config import settings
from prr.core.dependencies import get_service_repository, get_submission_repository
from prr.models.search import ServiceSearchResult
from prr.repositories.service_repository import ServiceRepository
from prr.repositories.submission_repository import SubmissionRepository
from prr.routers.errors import raise_bad_request

logger = structlog.get_logger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/search", tags=["Search"])


@router.get(
    "/services",
    response_model=List[ServiceSearchResult],
    summary="Search services and attach their latest PRR scores",
)
async def search_services(
    q: str = Query(default="", description="Case-insensitive substring of the service name"),
    services: ServiceRepository = Depends(get_service_repository),
    submissions: SubmissionRepository = Depends(get_submission_repository),
) -> List[ServiceSearchResult]:
    if not q.strip():
        raise_bad_request("Query parameter 'q' cannot be empty")

    results: List[ServiceSearchResult] = []
    for service in services.search(q, limit=settings.SEARCH_RESULT_LIMIT):
        latest = submissions.list_for_service(service.id, limit=1)
        if latest:
            results.append(ServiceSearchResult(
                service_id=service.id,
                service_name=service.name,
                latest_prr_scores=latest[0].section_scores,
                last_prr_timestamp=latest[0].timestamp,
            ))
        else:
            results.append(ServiceSearchResult(service_id=service.id, service_name=service.name))

    logger.info("services_searched", query=q.strip(), results=len(results))
    return results
