"""
Dependencies - PRR Platform
prr/core/dependencies.py

FastAPI dependency injection for repositories and services.
"""

from functools import lru_cache

from fastapi import Depends

from prr.repositories.service_repository import ServiceRepository
from prr.repositories.section_repository import SectionRepository
from prr.repositories.question_repository import QuestionRepository
from prr.repositories.submission_repository import SubmissionRepository
from prr.services.prr_service import PRRService


@lru_cache()
def get_service_repository() -> ServiceRepository:
    """Get cached ServiceRepository instance."""
    return ServiceRepository()


@lru_cache()
def get_section_repository() -> SectionRepository:
    """Get cached SectionRepository instance."""
    return SectionRepository()


@lru_cache()
def get_question_repository() -> QuestionRepository:
    """Get cached QuestionRepository instance."""
    return QuestionRepository()


@lru_cache()
def get_submission_repository() -> SubmissionRepository:
    """Get cached SubmissionRepository instance."""
    return SubmissionRepository()


def get_prr_service(
    questions: QuestionRepository = Depends(get_question_repository),
    submissions: SubmissionRepository = Depends(get_submission_repository),
) -> PRRService:
    """Build a PRRService over the shared repositories."""
    return PRRService(questions=questions, submissions=submissions)
