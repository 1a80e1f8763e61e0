# prr/scoring/comparator.py
"""
Submission Comparator
---------------------
Builds a PRRComparisonReport from two already-scored submissions.

"old" and "new" are positional. Ordering the two submissions by timestamp is
the caller's job (see PRRService.compare).

    sections        union of section ids in both score maps; a side without
                    the section gets a zero tally
    answer_changes  question answered on both sides, responses differ
                    (exact, case-sensitive)
    no_longer       answered in old only, new_answer = ""
    newly_answered  answered in new only, old_answer = ""

Every list is sorted by question_id, section keys are sorted.
"""
import structlog
from typing import Dict, List

from prr.models.comparison import (
    AnswerChangeDetail,
    PRRComparisonReport,
    SectionScoreComparison,
)
from prr.models.submission import PRRSubmission, SectionScore
from prr.scoring.catalog import QuestionCatalog, answer_lookup, question_text

logger = structlog.get_logger(__name__)


def _score_or_zero(scores: Dict[str, SectionScore], section_id: str) -> SectionScore:
    score = scores.get(section_id)
    return score if score is not None else SectionScore(section_id=section_id)


def compare_section_scores(
    old_scores: Dict[str, SectionScore],
    new_scores: Dict[str, SectionScore],
) -> Dict[str, SectionScoreComparison]:
    """Pair old and new tallies for every section present on either side."""
    comparison: Dict[str, SectionScoreComparison] = {}
    for section_id in sorted(set(old_scores) | set(new_scores)):
        comparison[section_id] = SectionScoreComparison(
            old_scores=_score_or_zero(old_scores, section_id),
            new_scores=_score_or_zero(new_scores, section_id),
        )
    return comparison


def compare_submissions(
    old: PRRSubmission,
    new: PRRSubmission,
    question_catalog: QuestionCatalog,
    service_id: str,
) -> PRRComparisonReport:
    """
    Diff two submissions.

    Args:
        old: Submission treated as the baseline.
        new: Submission compared against the baseline.
        question_catalog: Used only to attach question text.
        service_id: Copied into the report; membership is checked by the caller.

    Returns:
        PRRComparisonReport. A question id lands in at most one of the three
        answer lists.
    """
    old_answers = answer_lookup(old.answers)
    new_answers = answer_lookup(new.answers)

    answer_changes: List[AnswerChangeDetail] = []
    no_longer_answered: List[AnswerChangeDetail] = []
    newly_answered: List[AnswerChangeDetail] = []

    for question_id in sorted(old_answers):
        old_response = old_answers[question_id]
        if question_id in new_answers:
            new_response = new_answers[question_id]
            if old_response != new_response:
                answer_changes.append(AnswerChangeDetail(
                    question_id=question_id,
                    question_text=question_text(question_catalog, question_id),
                    old_answer=old_response,
                    new_answer=new_response,
                ))
        else:
            no_longer_answered.append(AnswerChangeDetail(
                question_id=question_id,
                question_text=question_text(question_catalog, question_id),
                old_answer=old_response,
                new_answer="",
            ))

    for question_id in sorted(new_answers):
        if question_id not in old_answers:
            newly_answered.append(AnswerChangeDetail(
                question_id=question_id,
                question_text=question_text(question_catalog, question_id),
                old_answer="",
                new_answer=new_answers[question_id],
            ))

    return PRRComparisonReport(
        service_id=service_id,
        prr_submission_id_old=old.id,
        prr_submission_id_new=new.id,
        section_comparison=compare_section_scores(old.section_scores, new.section_scores),
        answer_changes=answer_changes,
        newly_answered_questions=newly_answered,
        no_longer_answered_questions=no_longer_answered,
    )


class SubmissionComparator:
    """Compare submissions and log a summary of the diff."""

    def __init__(self, log=None):
        self._log = log if log is not None else logger

    def compare(
        self,
        old: PRRSubmission,
        new: PRRSubmission,
        question_catalog: QuestionCatalog,
        service_id: str,
    ) -> PRRComparisonReport:
        report = compare_submissions(old, new, question_catalog, service_id)
        self._log.info(
            "prr_compared",
            service_id=service_id,
            prr_id_old=old.id,
            prr_id_new=new.id,
            sections=len(report.section_comparison),
            answer_changes=len(report.answer_changes),
            newly_answered=len(report.newly_answered_questions),
            no_longer_answered=len(report.no_longer_answered_questions),
        )
        return report
