"""
PRR Service - PRR Platform
prr/services/prr_service.py

Request-layer orchestration around the scoring engine:

    submit   -> catalog snapshot -> SectionScorer -> store
    compare  -> fetch both -> service check -> order by timestamp
             -> catalog snapshot -> SubmissionComparator
"""

from datetime import datetime, timezone
from typing import List, Optional, Tuple

import structlog

from prr.config import settings
from prr.core.exceptions import ComparisonRequestError
from prr.models.comparison import PRRComparisonReport
from prr.models.submission import PRRSubmission, SubmitPRRRequest
from prr.repositories.question_repository import QuestionRepository
from prr.repositories.submission_repository import SubmissionRepository
from prr.scoring.comparator import SubmissionComparator
from prr.scoring.section_scorer import ScoringDiagnostic, SectionScorer

logger = structlog.get_logger(__name__)


def order_chronologically(
    first: PRRSubmission, second: PRRSubmission
) -> Tuple[PRRSubmission, PRRSubmission]:
    """Return (old, new). Only a strictly earlier first is old; on a tie the second is old."""
    first_ts = SubmissionRepository.normalize_timestamp(first.timestamp)
    second_ts = SubmissionRepository.normalize_timestamp(second.timestamp)
    if first_ts < second_ts:
        return first, second
    return second, first


class PRRService:
    """Submit, fetch and compare PRR submissions."""

    def __init__(
        self,
        questions: QuestionRepository,
        submissions: SubmissionRepository,
        scorer: Optional[SectionScorer] = None,
        comparator: Optional[SubmissionComparator] = None,
    ):
        self.questions = questions
        self.submissions = submissions
        self.scorer = scorer or SectionScorer()
        self.comparator = comparator or SubmissionComparator()

    def submit(
        self,
        request: SubmitPRRRequest,
        timestamp: Optional[datetime] = None,
    ) -> Tuple[PRRSubmission, List[ScoringDiagnostic]]:
        """
        Score and store a new submission.

        Returns:
            The stored submission and the scoring diagnostics
        """
        catalog = self.questions.catalog(limit=settings.QUESTION_CATALOG_LIMIT)
        if not catalog:
            logger.warning("prr_catalog_empty", service_id=request.service_id)

        result = self.scorer.score(request.answers, catalog)
        submission = PRRSubmission(
            service_id=request.service_id,
            user_id=request.user_id,
            timestamp=timestamp or datetime.now(timezone.utc),
            answers=list(request.answers),
            section_scores=result.section_scores,
        )
        self.submissions.insert(submission)

        logger.info(
            "prr_submitted",
            submission_id=submission.id,
            service_id=submission.service_id,
            user_id=submission.user_id,
            sections=len(submission.section_scores),
        )
        return submission, result.diagnostics

    def get(self, submission_id: str) -> PRRSubmission:
        return self.submissions.get_or_raise(submission_id)

    def history(self, service_id: str, limit: Optional[int] = None) -> List[PRRSubmission]:
        return self.submissions.list_for_service(
            service_id, limit=limit or settings.PRR_HISTORY_LIMIT
        )

    def compare(self, service_id: str, prr_id1: str, prr_id2: str) -> PRRComparisonReport:
        """
        Compare two submissions of one service, oldest first.

        Raises:
            ComparisonRequestError: same IDs, or a submission of another service
            EntityNotFoundException: either submission does not exist
        """
        if prr_id1 == prr_id2:
            raise ComparisonRequestError("prr_id1 and prr_id2 cannot be the same")

        first = self.submissions.get_or_raise(prr_id1)
        second = self.submissions.get_or_raise(prr_id2)

        if first.service_id != service_id or second.service_id != service_id:
            raise ComparisonRequestError(
                "Submissions do not belong to the specified service_id"
            )

        old, new = order_chronologically(first, second)
        catalog = self.questions.catalog(limit=settings.QUESTION_CATALOG_LIMIT)
        return self.comparator.compare(old, new, catalog, service_id)
