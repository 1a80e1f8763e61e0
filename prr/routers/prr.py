"""
PRR Router - PRR Platform
prr/routers/prr.py

Submit, fetch, list and compare Product Readiness Review submissions.
"""

from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, Query, Response, status

from prr.core.dependencies import get_prr_service
from prr.config import settings
from prr.core.exceptions import ComparisonRequestError, EntityNotFoundException
from prr.models.comparison import PRRComparisonReport
from prr.models.submission import PRRSubmission, SubmitPRRRequest
from prr.routers.errors import raise_bad_request, raise_not_found
from prr.services.prr_service import PRRService

logger = structlog.get_logger(__name__)

SCORING_WARNINGS_HEADER = "X-PRR-Scoring-Warnings"

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/prr", tags=["PRR Submissions"])


@router.post(
    "",
    response_model=PRRSubmission,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a Product Readiness Review",
)
async def submit_prr(
    payload: SubmitPRRRequest,
    response: Response,
    service: PRRService = Depends(get_prr_service),
) -> PRRSubmission:
    submission, diagnostics = service.submit(payload)
    # Skipped answers are not errors; surface the count to the caller.
    response.headers[SCORING_WARNINGS_HEADER] = str(len(diagnostics))
    if diagnostics:
        logger.debug(
            "prr_submit_diagnostics",
            submission_id=submission.id,
            warnings=len(diagnostics),
            kinds=sorted({d.kind.value for d in diagnostics}),
        )
    return submission


@router.get(
    "/history",
    response_model=List[PRRSubmission],
    summary="List submissions for a service, newest first",
)
async def list_prr_history(
    service_id: str = Query(..., min_length=1),
    limit: Optional[int] = Query(default=None, ge=1, le=1000),
    service: PRRService = Depends(get_prr_service),
) -> List[PRRSubmission]:
    return service.history(service_id, limit=limit)


@router.get(
    "/compare",
    response_model=PRRComparisonReport,
    summary="Compare two submissions of a service",
)
async def compare_prr_submissions(
    service_id: str = Query(..., min_length=1),
    prr_id1: str = Query(..., min_length=1),
    prr_id2: str = Query(..., min_length=1),
    service: PRRService = Depends(get_prr_service),
) -> PRRComparisonReport:
    try:
        return service.compare(service_id, prr_id1, prr_id2)
    except ComparisonRequestError as e:
        raise_bad_request(e.message)
    except EntityNotFoundException as e:
        logger.info("prr_compare_missing", submission_id=e.entity_id)
        raise_not_found("PRR_NOT_FOUND", f"Submission {e.entity_id} not found")


@router.get(
    "/{submission_id}",
    response_model=PRRSubmission,
    summary="Get a submission by ID",
)
async def get_prr_submission(
    submission_id: str,
    service: PRRService = Depends(get_prr_service),
) -> PRRSubmission:
    try:
        return service.get(submission_id)
    except EntityNotFoundException:
        raise_not_found("PRR_NOT_FOUND", "PRR submission not found")
