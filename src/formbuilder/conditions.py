"""
Visibility Condition Tree

Decides whether a question is shown, given the answers collected so far.

A condition is a small owned tree built from four node kinds:
    - ValueCheck: compares one prior answer against an expected value
    - AndCondition: all children must hold
    - OrCondition: at least one child must hold
    - NotCondition: negates its single child

Every node answers two questions:
    evaluate(responses) -> bool
    describe() -> str  (display text for "visible when..." annotations)

The responses mapping is flat (question id -> answer) and is never mutated.

ARCHITECTURAL RULE:
    Evaluation is total. An unanswered question is not an error, it simply
    makes a ValueCheck false.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional, Tuple, Union

from .formatting import format_value


Scalar = Union[str, int, float, bool, None]


class ConditionKind(Enum):
    """
    Tags used in configuration documents for each node kind.
    """

    VALUE_CHECK = "value_check"
    AND = "and"
    OR = "or"
    NOT = "not"


class Condition(ABC):
    """
    Base class for all condition nodes.

    Subclasses set `kind` and implement `evaluate` and `describe`.
    `connective` is the tag shown in front of a question's visibility line
    when this node is the root: composites report "AND"/"OR", leaves and
    negations report None and render as a plain <Visible> line.
    """

    kind: ClassVar[ConditionKind]
    connective: ClassVar[Optional[str]] = None

    @abstractmethod
    def evaluate(self, responses: Mapping[str, Any]) -> bool:
        ...

    @abstractmethod
    def describe(self) -> str:
        ...


def _strictly_equal(actual: Any, expected: Any) -> bool:
    # True == 1 in Python; answers must match in type as well as value.
    return type(actual) is type(expected) and actual == expected


@dataclass(frozen=True)
class ValueCheck(Condition):
    """
    Holds when the answer to `question_id` equals `expected_value`.

    Example:
        ValueCheck("have_alias", True, question_text="Do you have an alias?")

    Properties:
        question_id: id of the question whose answer is inspected
        expected_value: scalar the answer must equal (type and value)
        question_text: optional prompt text used by describe()

    IMPORTANT:
        A question id missing from the responses evaluates to False for
        every expected value, including None.
    """

    question_id: str
    expected_value: Scalar
    question_text: Optional[str] = None

    kind: ClassVar[ConditionKind] = ConditionKind.VALUE_CHECK

    def evaluate(self, responses: Mapping[str, Any]) -> bool:
        if self.question_id not in responses:
            return False
        return _strictly_equal(responses[self.question_id], self.expected_value)

    def describe(self) -> str:
        label = self.question_text if self.question_text is not None else self.question_id
        return f"{label}: {format_value(self.expected_value)}"


@dataclass(frozen=True)
class AndCondition(Condition):
    """
    Holds when every child holds. An empty group holds (vacuous truth).
    """

    conditions: Tuple[Condition, ...] = field(default_factory=tuple)

    kind: ClassVar[ConditionKind] = ConditionKind.AND
    connective: ClassVar[Optional[str]] = "AND"

    def __post_init__(self):
        object.__setattr__(self, "conditions", tuple(self.conditions))

    def evaluate(self, responses: Mapping[str, Any]) -> bool:
        return all(c.evaluate(responses) for c in self.conditions)

    def describe(self) -> str:
        return "\n   <AND Visible> ".join(c.describe() for c in self.conditions)


@dataclass(frozen=True)
class OrCondition(Condition):
    """
    Holds when at least one child holds. An empty group never holds.
    """

    conditions: Tuple[Condition, ...] = field(default_factory=tuple)

    kind: ClassVar[ConditionKind] = ConditionKind.OR
    connective: ClassVar[Optional[str]] = "OR"

    def __post_init__(self):
        object.__setattr__(self, "conditions", tuple(self.conditions))

    def evaluate(self, responses: Mapping[str, Any]) -> bool:
        return any(c.evaluate(responses) for c in self.conditions)

    def describe(self) -> str:
        return "\n   <OR Visible> ".join(c.describe() for c in self.conditions)


@dataclass(frozen=True)
class NotCondition(Condition):
    """
    Negates its single child.

    Example:
        NOT (live_in_us == true)

    Becomes:
        NotCondition(ValueCheck("live_in_us", True))
    """

    condition: Condition

    kind: ClassVar[ConditionKind] = ConditionKind.NOT

    def evaluate(self, responses: Mapping[str, Any]) -> bool:
        return not self.condition.evaluate(responses)

    def describe(self) -> str:
        return f"NOT {self.condition.describe()}"


__all__ = [
    "Scalar",
    "ConditionKind",
    "Condition",
    "ValueCheck",
    "AndCondition",
    "OrCondition",
    "NotCondition",
]
