"""
Submission Repository - PRR Platform
prr/repositories/submission_repository.py
"""

from typing import List

from prr.models.submission import PRRSubmission
from prr.repositories.base import BaseRepository


class SubmissionRepository(BaseRepository[PRRSubmission]):
    """Repository for scored PRR submissions."""

    ENTITY_NAME = "PRR submission"

    def list_for_service(self, service_id: str, limit: int = 100) -> List[PRRSubmission]:
        """
        Submissions for a service, newest first.

        Args:
            service_id: Service to filter on (exact match)
            limit: Maximum number of submissions returned

        Returns:
            List of submissions sorted by timestamp descending
        """
        matches = [s for s in self.all() if s.service_id == service_id]
        matches.sort(key=lambda s: self.normalize_timestamp(s.timestamp), reverse=True)
        return matches[:limit]
