"""
Questionnaire Analyzer: read-only diagnostics for built questionnaires.

Reports:
    - Question counts per kind
    - Visibility condition complexity
    - References to unknown or later questions
    - Choice questions with nothing to choose
    - Empty AND/OR groups

IMPORTANT: This never modifies the questionnaire and never raises for a
well-formed one. Findings are warnings, not errors: evaluation already
treats an unknown id as "not answered".
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .conditions import AndCondition, Condition, NotCondition, OrCondition, ValueCheck
from .questionnaire import Questionnaire
from .questions import CheckboxQuestion, ChoiceQuestion


@dataclass
class ConditionMetrics:
    """Metrics about a single condition tree."""
    depth: int = 0
    node_count: int = 0
    question_references: List[str] = field(default_factory=list)
    empty_groups: int = 0


def _analyze_condition(condition: Optional[Condition]) -> ConditionMetrics:
    """Recursively analyze a condition tree."""
    if condition is None:
        return ConditionMetrics()

    metrics = ConditionMetrics(depth=1, node_count=1)

    if isinstance(condition, ValueCheck):
        metrics.question_references.append(condition.question_id)

    elif isinstance(condition, (AndCondition, OrCondition)):
        if not condition.conditions:
            metrics.empty_groups += 1
        for child in condition.conditions:
            sub = _analyze_condition(child)
            metrics.depth = max(metrics.depth, 1 + sub.depth)
            metrics.node_count += sub.node_count
            metrics.question_references.extend(sub.question_references)
            metrics.empty_groups += sub.empty_groups

    elif isinstance(condition, NotCondition):
        sub = _analyze_condition(condition.condition)
        metrics.depth = 1 + sub.depth
        metrics.node_count += sub.node_count
        metrics.question_references.extend(sub.question_references)
        metrics.empty_groups += sub.empty_groups

    return metrics


def referenced_question_ids(condition: Optional[Condition]) -> List[str]:
    """Question ids used by ValueCheck leaves, first occurrence order, no repeats."""
    return list(dict.fromkeys(_analyze_condition(condition).question_references))


@dataclass
class QuestionnaireReport:
    """Analysis report for one questionnaire."""

    questionnaire_id: str
    total_questions: int = 0
    questions_by_kind: Dict[str, int] = field(default_factory=dict)
    conditional_questions: int = 0

    max_condition_depth: int = 0
    total_condition_nodes: int = 0

    unknown_references: Dict[str, List[str]] = field(default_factory=dict)
    forward_references: Dict[str, List[str]] = field(default_factory=dict)
    questions_without_options: List[str] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def ok(self) -> bool:
        return not self.warnings


def analyze_questionnaire(questionnaire: Questionnaire) -> QuestionnaireReport:
    """
    Analyze a Questionnaire.

    Returns a QuestionnaireReport with metrics and warnings.
    """
    report = QuestionnaireReport(questionnaire_id=questionnaire.id)
    report.total_questions = len(questionnaire.questions)
    report.questions_by_kind = dict(Counter(q.kind.value for q in questionnaire.questions))

    all_ids: Set[str] = {q.id for q in questionnaire.questions}
    declared_before: Set[str] = set()

    for question in questionnaire.questions:
        if question.visibility is not None:
            report.conditional_questions += 1
            metrics = _analyze_condition(question.visibility)
            report.max_condition_depth = max(report.max_condition_depth, metrics.depth)
            report.total_condition_nodes += metrics.node_count

            for ref in dict.fromkeys(metrics.question_references):
                if ref not in all_ids:
                    report.unknown_references.setdefault(question.id, []).append(ref)
                elif ref not in declared_before:
                    report.forward_references.setdefault(question.id, []).append(ref)

            if metrics.empty_groups:
                report.add_warning(f"Empty AND/OR group in visibility of '{question.id}'")

        if isinstance(question, (ChoiceQuestion, CheckboxQuestion)):
            has_choices = (
                question.all_options if isinstance(question, CheckboxQuestion) else question.options
            )
            if not has_choices:
                report.questions_without_options.append(question.id)

        declared_before.add(question.id)

    for qid, refs in report.unknown_references.items():
        report.add_warning(f"'{qid}' depends on unknown question(s): {', '.join(refs)}")

    for qid, refs in report.forward_references.items():
        report.add_warning(f"'{qid}' depends on question(s) not asked before it: {', '.join(refs)}")

    if report.questions_without_options:
        report.add_warning(
            f"Questions with no options: {', '.join(report.questions_without_options)}"
        )

    return report


__all__ = [
    "ConditionMetrics",
    "QuestionnaireReport",
    "analyze_questionnaire",
    "referenced_question_ids",
]
