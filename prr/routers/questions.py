"""
Question Router - PRR Platform
prr/routers/questions.py

Question catalog administration. Submissions keep the tallies computed at
submit time, so editing or deleting a question never rescores them.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from prr.config import settings
from prr.core.dependencies import get_question_repository
from prr.core.exceptions import EntityNotFoundException
from prr.models.catalog import Question, QuestionCreate, QuestionUpdate
from prr.repositories.question_repository import QuestionRepository
from prr.routers.errors import raise_not_found

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/questions", tags=["Questions"])


@router.post(
    "",
    response_model=Question,
    status_code=status.HTTP_201_CREATED,
    summary="Create a question",
)
async def create_question(
    payload: QuestionCreate,
    repo: QuestionRepository = Depends(get_question_repository),
) -> Question:
    return repo.create(payload)


@router.get("", response_model=List[Question], summary="List questions by section and order")
async def list_questions(
    repo: QuestionRepository = Depends(get_question_repository),
) -> List[Question]:
    return repo.list_all()


@router.put("/{question_id}", response_model=Question, summary="Update a question")
async def update_question(
    question_id: str,
    payload: QuestionUpdate,
    repo: QuestionRepository = Depends(get_question_repository),
) -> Question:
    try:
        return repo.update(question_id, payload)
    except EntityNotFoundException:
        raise_not_found("QUESTION_NOT_FOUND", "Question not found")


@router.delete(
    "/{question_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a question",
)
async def delete_question(
    question_id: str,
    repo: QuestionRepository = Depends(get_question_repository),
) -> None:
    try:
        repo.delete(question_id)
    except EntityNotFoundException:
        raise_not_found("QUESTION_NOT_FOUND", "Question not found")
