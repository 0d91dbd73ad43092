"""
Questionnaire: the root container.

Holds an id, a title and an ordered tuple of questions. Declaration order
is both display order and numbering order. Built once, never modified.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .questions import Question


@dataclass(frozen=True)
class Questionnaire:
    """
    A titled, ordered collection of questions sharing one id namespace.

    Properties:
        id: stable identifier, also the key under which this questionnaire's
            answers are stored in a combined responses document
        title: display title
        questions: questions in declaration order

    INVARIANTS:
        - question ids are unique (enforced by schema validation)
    """

    id: str
    title: str
    questions: Tuple[Question, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "questions", tuple(self.questions))

    def get_question(self, question_id: str) -> Optional[Question]:
        """
        Retrieve a question by ID.

        Returns:
            Question object or None if not found
        """
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    def responses_for(self, all_responses: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Pick this questionnaire's answers out of a combined document shaped
        as {questionnaire_id: {question_id: answer}}.
        """
        if not all_responses:
            return {}
        scoped = all_responses.get(self.id)
        return dict(scoped) if isinstance(scoped, Mapping) else {}

    def visible_questions(self, responses: Mapping[str, Any]) -> List[Question]:
        """Questions visible for a flat responses snapshot, in declaration order."""
        return [q for q in self.questions if q.is_visible(responses)]


__all__ = ["Questionnaire"]
