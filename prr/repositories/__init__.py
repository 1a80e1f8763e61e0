from prr.repositories.base import BaseRepository
from prr.repositories.service_repository import ServiceRepository
from prr.repositories.section_repository import SectionRepository
from prr.repositories.question_repository import QuestionRepository
from prr.repositories.submission_repository import SubmissionRepository

__all__ = [
    "BaseRepository",
    "ServiceRepository",
    "SectionRepository",
    "QuestionRepository",
    "SubmissionRepository",
]
