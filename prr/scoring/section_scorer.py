# prr/scoring/section_scorer.py
"""
Section Scorer
--------------
Derives per-section Yes / No / N/A tallies from a submission's answers.

Algorithm:
    for each answer, in order (duplicates each count):
        question missing from catalog      -> skip, unknown_question
        question has no section_id         -> skip, missing_section
        response.lower() in yes / no / n/a -> increment that counter
        anything else                      -> tally created, nothing counted,
                                              unrecognized_response

Anomalies never abort scoring. They are collected as ScoringDiagnostic
entries and handed back to the caller; SectionScorer also logs them.
"""
import structlog
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from prr.models.enumerations import AnswerResponse, DiagnosticKind
from prr.models.submission import Answer, SectionScore
from prr.scoring.catalog import QuestionCatalog

logger = structlog.get_logger(__name__)

_COUNTER_BY_RESPONSE: Dict[str, str] = {
    AnswerResponse.YES.value.lower(): "yes_count",
    AnswerResponse.NO.value.lower(): "no_count",
    AnswerResponse.NOT_APPLICABLE.value.lower(): "na_count",
}


@dataclass(frozen=True)
class ScoringDiagnostic:
    """A data-integrity warning raised while tallying one answer."""
    kind: DiagnosticKind
    question_id: str
    detail: str = ""


@dataclass
class ScoringResult:
    """Output of SectionScorer.score()."""
    section_scores: Dict[str, SectionScore]
    diagnostics: List[ScoringDiagnostic] = field(default_factory=list)

    @property
    def answers_counted(self) -> int:
        return sum(s.total for s in self.section_scores.values())


def normalize_response(response: str) -> Optional[str]:
    """Return the SectionScore counter name for a response, or None if unrecognized."""
    return _COUNTER_BY_RESPONSE.get(response.lower())


def score_submission(
    answers: Iterable[Answer],
    question_catalog: QuestionCatalog,
    diagnostics: Optional[List[ScoringDiagnostic]] = None,
) -> Dict[str, SectionScore]:
    """
    Tally answers per section.

    Args:
        answers: The submission's answers. May be empty.
        question_catalog: question_id -> Question snapshot. May be missing
                          entries referenced by answers.
        diagnostics: Optional list that receives one ScoringDiagnostic per
                     skipped or unrecognized answer.

    Returns:
        Mapping section_id -> SectionScore. Sections with no resolvable
        answers are absent.
    """
    tallies: Dict[str, Dict[str, int]] = {}

    for answer in answers:
        question_id, response = answer.question_id, answer.response
        question = question_catalog.get(question_id)
        if question is None:
            if diagnostics is not None:
                diagnostics.append(ScoringDiagnostic(
                    DiagnosticKind.UNKNOWN_QUESTION, question_id,
                    "question not found in catalog",
                ))
            continue

        section_id = question.section_id
        if not section_id:
            if diagnostics is not None:
                diagnostics.append(ScoringDiagnostic(
                    DiagnosticKind.MISSING_SECTION, question_id,
                    "question has an empty section_id",
                ))
            continue

        tally = tallies.setdefault(
            section_id, {"yes_count": 0, "no_count": 0, "na_count": 0}
        )
        counter = normalize_response(response)
        if counter is None:
            if diagnostics is not None:
                diagnostics.append(ScoringDiagnostic(
                    DiagnosticKind.UNRECOGNIZED_RESPONSE, question_id,
                    f"unrecognized response {response!r}",
                ))
            continue
        tally[counter] += 1

    return {
        section_id: SectionScore(section_id=section_id, **counts)
        for section_id, counts in tallies.items()
    }


class SectionScorer:
    """Score submissions and log data-integrity anomalies."""

    def __init__(self, log=None):
        self._log = log if log is not None else logger

    def score(
        self,
        answers: Iterable[Answer],
        question_catalog: QuestionCatalog,
    ) -> ScoringResult:
        answers = list(answers)
        diagnostics: List[ScoringDiagnostic] = []
        section_scores = score_submission(answers, question_catalog, diagnostics)

        for diag in diagnostics:
            self._log.warning(
                "prr_answer_skipped"
                if diag.kind != DiagnosticKind.UNRECOGNIZED_RESPONSE
                else "prr_response_unrecognized",
                kind=diag.kind.value,
                question_id=diag.question_id,
                detail=diag.detail,
            )

        result = ScoringResult(section_scores=section_scores, diagnostics=diagnostics)
        self._log.info(
            "prr_scored",
            answers=len(answers),
            sections=len(section_scores),
            answers_counted=result.answers_counted,
            anomalies=len(diagnostics),
        )
        return result
