from pydantic import BaseModel, ConfigDict, Field, model_serializer
from typing import Dict, List

from prr.models.submission import SectionScore


class SectionScoreComparison(BaseModel):
    """Old and new tallies for one section."""

    model_config = ConfigDict(populate_by_name=True)

    old_scores: SectionScore = Field(..., alias="oldScores")
    new_scores: SectionScore = Field(..., alias="newScores")


class AnswerChangeDetail(BaseModel):
    """
    One question whose answer differs between two submissions.
    An empty old_answer / new_answer means "not answered" on that side.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    question_id: str = Field(..., alias="questionId")
    question_text: str = Field(default="", alias="questionText")
    old_answer: str = Field(default="", alias="oldAnswer")
    new_answer: str = Field(default="", alias="newAnswer")

    @model_serializer(mode="wrap")
    def _omit_empty_question_text(self, handler):
        data = handler(self)
        for key in ("questionText", "question_text"):
            if data.get(key) == "":
                data.pop(key)
        return data


class PRRComparisonReport(BaseModel):
    """
    Structured diff between two submissions of the same service.

    The three change lists are always present, empty when nothing qualifies.
    """

    model_config = ConfigDict(populate_by_name=True)

    service_id: str = Field(..., alias="serviceId")
    prr_submission_id_old: str = Field(..., alias="prrSubmissionIdOld")
    prr_submission_id_new: str = Field(..., alias="prrSubmissionIdNew")
    section_comparison: Dict[str, SectionScoreComparison] = Field(
        default_factory=dict, alias="sectionComparison"
    )
    answer_changes: List[AnswerChangeDetail] = Field(default_factory=list, alias="answerChanges")
    newly_answered_questions: List[AnswerChangeDetail] = Field(
        default_factory=list, alias="newlyAnsweredQuestions"
    )
    no_longer_answered_questions: List[AnswerChangeDetail] = Field(
        default_factory=list, alias="noLongerAnsweredQuestions"
    )
