# tests/conftest.py

"""
Pytest Fixtures - Shared catalog, submissions and API client for all tests

CATALOG REFERENCE:
- s1 (Observability): q1, q2
- s2 (Security):      q3, q4
- q5 has no section (data-integrity case)
"""

import pytest
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient

from prr.main import app
from prr.core.dependencies import (
    get_question_repository,
    get_section_repository,
    get_service_repository,
    get_submission_repository,
)
from prr.models.catalog import Question
from prr.models.submission import Answer, PRRSubmission
from prr.repositories import (
    QuestionRepository,
    SectionRepository,
    ServiceRepository,
    SubmissionRepository,
)
from prr.scoring.catalog import build_catalog
from prr.scoring.section_scorer import score_submission


SERVICE_ID = "service1"
BASE_TIME = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_submission(submission_id, answers, catalog, service_id=SERVICE_ID, timestamp=None):
    """Build a scored submission from (question_id, response) pairs."""
    answer_models = [Answer(question_id=q, response=r) for q, r in answers]
    return PRRSubmission(
        id=submission_id,
        service_id=service_id,
        user_id="user1",
        timestamp=timestamp or BASE_TIME,
        answers=answer_models,
        section_scores=score_submission(answer_models, catalog),
    )


# =============================================================================
# CATALOG FIXTURES
# =============================================================================

@pytest.fixture
def questions():
    """Four sectioned questions and one with an empty section."""
    return [
        Question(id="q1", section_id="s1", text="Question 1 Text", order=1),
        Question(id="q2", section_id="s1", text="Question 2 Text", order=2),
        Question(id="q3", section_id="s2", text="Question 3 Text", order=1, is_essential=True),
        Question(id="q4", section_id="s2", text="Question 4 Text", order=2),
        Question(id="q5", section_id="", text="Orphan question"),
    ]


@pytest.fixture
def catalog(questions):
    return build_catalog(questions)


@pytest.fixture
def submission_factory(catalog):
    def _factory(submission_id, answers, **kwargs):
        return make_submission(submission_id, answers, catalog, **kwargs)
    return _factory


# =============================================================================
# REPOSITORY / API FIXTURES
# =============================================================================

@pytest.fixture
def repositories():
    """Fresh in-memory repositories for each test."""
    return {
        "services": ServiceRepository(),
        "sections": SectionRepository(),
        "questions": QuestionRepository(),
        "submissions": SubmissionRepository(),
    }


@pytest.fixture
def seeded_question_repository(repositories, questions):
    repo = repositories["questions"]
    for q in questions:
        repo.insert(q)
    return repo


@pytest.fixture
def client(repositories):
    """TestClient wired to the per-test repositories."""
    app.dependency_overrides[get_service_repository] = lambda: repositories["services"]
    app.dependency_overrides[get_section_repository] = lambda: repositories["sections"]
    app.dependency_overrides[get_question_repository] = lambda: repositories["questions"]
    app.dependency_overrides[get_submission_repository] = lambda: repositories["submissions"]
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def later():
    """Offset helper: later(hours) -> BASE_TIME + hours."""
    return lambda hours: BASE_TIME + timedelta(hours=hours)
