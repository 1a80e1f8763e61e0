from pydantic import BaseModel, ConfigDict, Field, field_validator
from uuid import uuid4
from datetime import datetime, timezone
from typing import Dict, List


class Answer(BaseModel):
    """
    Response to one question. Expected values are "Yes", "No" or "N/A"
    (case-insensitive); anything else is kept but never tallied.
    """

    model_config = ConfigDict(frozen=True)

    question_id: str = Field(..., description="Question being answered")
    response: str = Field(..., description='"Yes", "No" or "N/A"')


class SectionScore(BaseModel):
    """
    Yes / No / N/A tally for one section.
    """

    section_id: str = Field(..., description="Section the tally belongs to")
    yes_count: int = Field(default=0, ge=0)
    no_count: int = Field(default=0, ge=0)
    na_count: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.yes_count + self.no_count + self.na_count


class PRRSubmission(BaseModel):
    """
    A complete Product Readiness Review for one service by one user.

    section_scores is computed once when the submission is created and the
    model is frozen afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique submission identifier")
    service_id: str = Field(..., description="Service being reviewed")
    user_id: str = Field(..., description="Submitting user")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Submission time (UTC)",
    )
    answers: List[Answer] = Field(default_factory=list)
    section_scores: Dict[str, SectionScore] = Field(
        default_factory=dict,
        description="Calculated tallies keyed by section_id",
    )


class SubmitPRRRequest(BaseModel):
    """
    Payload for POST /prr.
    """

    service_id: str
    user_id: str
    answers: List[Answer] = Field(..., min_length=1)

    @field_validator("service_id")
    @classmethod
    def service_id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Service ID cannot be empty")
        return v.strip()

    @field_validator("user_id")
    @classmethod
    def user_id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("User ID cannot be empty")
        return v.strip()
