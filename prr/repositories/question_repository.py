"""
Question Repository - PRR Platform
prr/repositories/question_repository.py

Question catalog storage. catalog() returns a point-in-time snapshot used for
scoring and comparison.
"""

from typing import Dict, List

from prr.models.catalog import Question, QuestionCreate, QuestionUpdate
from prr.repositories.base import BaseRepository
from prr.scoring.catalog import build_catalog


class QuestionRepository(BaseRepository[Question]):
    """Repository for the question catalog."""

    ENTITY_NAME = "Question"

    def create(self, data: QuestionCreate) -> Question:
        return self.insert(Question(**data.model_dump()))

    def update(self, question_id: str, data: QuestionUpdate) -> Question:
        """Replace the stored question with a copy carrying the updated fields."""
        with self.locked():
            current = self.get_or_raise(question_id)
            changes = data.model_dump(exclude_unset=True, exclude_none=True)
            return self.replace(current.model_copy(update=changes))

    def list_all(self) -> List[Question]:
        return sorted(self.all(), key=lambda q: (q.section_id, q.order, q.id))

    def catalog(self, limit: int = 10000) -> Dict[str, Question]:
        """Snapshot of up to `limit` questions keyed by id."""
        return build_catalog(self.list_all()[:limit])
