"""
Question catalog helpers
prr/scoring/catalog.py

The catalog is a plain mapping question_id -> Question. Scoring and comparison
take it as an explicit argument so both run against the same snapshot.
"""

from typing import Dict, Iterable, Mapping

from prr.models.catalog import Question
from prr.models.submission import Answer

QuestionCatalog = Mapping[str, Question]


def build_catalog(questions: Iterable[Question]) -> Dict[str, Question]:
    """Index questions by id. Later entries replace earlier ones with the same id."""
    return {q.id: q for q in questions if q.id}


def question_text(catalog: QuestionCatalog, question_id: str) -> str:
    """Display text for a question, or "" when it is not in the catalog."""
    question = catalog.get(question_id)
    return question.text if question is not None else ""


def answer_lookup(answers: Iterable[Answer]) -> Dict[str, str]:
    """
    Map question_id -> response.

    Duplicate question ids resolve to the last answer seen, so the result is
    deterministic for a given answer order.
    """
    lookup: Dict[str, str] = {}
    for answer in answers:
        lookup[answer.question_id] = answer.response
    return lookup
