"""
Health Check Router - PRR Platform
prr/routers/health.py
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from prr.config import settings
from prr.core.dependencies import get_question_repository, get_submission_repository
from prr.repositories.question_repository import QuestionRepository
from prr.repositories.submission_repository import SubmissionRepository

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    counts: Dict[str, int]


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health(
    questions: QuestionRepository = Depends(get_question_repository),
    submissions: SubmissionRepository = Depends(get_submission_repository),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        counts={
            "questions": questions.count(),
            "submissions": submissions.count(),
        },
    )
