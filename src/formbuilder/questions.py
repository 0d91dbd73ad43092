"""
Question Model

The five question kinds a questionnaire can hold:
    - TextQuestion: free text with optional length bounds
    - BooleanQuestion: fixed Yes/No (values true/false)
    - RadioQuestion: pick one of an ordered option list
    - CheckboxQuestion: pick any of an option list, plus optional
      "Other" and "None of the above" entries
    - DropdownQuestion: pick one, rendered as a dropdown list

Each question optionally owns a visibility Condition and offers:
    is_visible(responses) -> bool
    render(responses, fmt) -> str

render() does not look at visibility; filtering happens in Questionnaire.
Every rendered line ends with a newline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, Mapping, Optional, Tuple

from .conditions import Condition, Scalar
from .formatting import FormatConfig, format_value


OTHER_VALUE = "_"
NONE_OF_THE_ABOVE_VALUE = "none_of_the_above"

INDENT = "   "


class QuestionKind(Enum):
    """Question type tags as written in configuration documents."""

    TEXT = "text"
    BOOLEAN = "boolean"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    DROPDOWN = "dropdown"

    @property
    def label(self) -> str:
        return f"{self.value} question"


@dataclass(frozen=True)
class Option:
    """
    One selectable answer.

    Properties:
        label: text shown to the respondent
        value: scalar stored as the answer
        show_value: append "(value: '<v>')" when rendering
    """

    label: str
    value: Scalar
    show_value: bool = True


_PLAIN = FormatConfig.plain()


@dataclass(frozen=True)
class Question(ABC):
    """
    Common shape of every question kind.

    Properties:
        id: unique within its questionnaire
        text: the prompt
        visibility: optional root of the condition tree gating this question

    Subclasses set `kind` and implement `_render_body`.
    """

    id: str
    text: str
    visibility: Optional[Condition] = None

    kind: ClassVar[QuestionKind]

    def is_visible(self, responses: Mapping[str, Any]) -> bool:
        if self.visibility is None:
            return True
        return self.visibility.evaluate(responses)

    def answer(self, responses: Mapping[str, Any]) -> Any:
        return responses.get(self.id)

    def render(self, responses: Mapping[str, Any], fmt: FormatConfig = _PLAIN) -> str:
        lines = [f"{self.text} {fmt.style(f'({self.kind.label})', 'muted')}"]
        lines.extend(self._render_body(responses, fmt))
        if self.visibility is not None:
            lines.append(self._render_visibility())
        return "".join(line + "\n" for line in lines)

    @abstractmethod
    def _render_body(self, responses: Mapping[str, Any], fmt: FormatConfig) -> List[str]:
        ...

    def _render_visibility(self) -> str:
        tag = self.visibility.connective
        prefix = f"<{tag} Visible>" if tag else "<Visible>"
        return f"{INDENT}{prefix} {self.visibility.describe()}"


def _marker(selected: bool) -> str:
    return "x" if selected else " "


def _option_line(
    option: Option, selected: bool, brackets: str, fmt: FormatConfig, quote_value: bool = True
) -> str:
    left, right = brackets
    label = fmt.style(option.label, "selected") if selected else option.label
    line = f"{INDENT}- {left}{_marker(selected)}{right} {label}"
    if option.show_value:
        shown = format_value(option.value)
        line += f" (value: '{shown}')" if quote_value else f" (value: {shown})"
    return line


def _same_answer(answer: Any, value: Any) -> bool:
    return type(answer) is type(value) and answer == value


@dataclass(frozen=True)
class TextQuestion(Question):
    """Free text answer, optionally bounded by min/max length."""

    min_length: Optional[int] = None
    max_length: Optional[int] = None

    kind: ClassVar[QuestionKind] = QuestionKind.TEXT

    def _render_body(self, responses, fmt):
        constraints = []
        if self.min_length is not None:
            constraints.append(f"at least <{self.min_length}> characters")
        if self.max_length is not None:
            constraints.append(f"at most <{self.max_length}> characters")
        if not constraints:
            return []
        return [f"{INDENT}You can enter {' and '.join(constraints)}."]


BOOLEAN_OPTIONS: Tuple[Option, ...] = (
    Option(label="Yes", value=True),
    Option(label="No", value=False),
)


@dataclass(frozen=True)
class BooleanQuestion(Question):
    """Yes/No question. Answers are the booleans true and false."""

    kind: ClassVar[QuestionKind] = QuestionKind.BOOLEAN

    @property
    def options(self) -> Tuple[Option, ...]:
        return BOOLEAN_OPTIONS

    def _render_body(self, responses, fmt):
        answer = self.answer(responses)
        return [
            _option_line(option, answer is option.value, "()", fmt, quote_value=False)
            for option in BOOLEAN_OPTIONS
        ]


@dataclass(frozen=True)
class ChoiceQuestion(Question):
    """
    Base for single-answer option lists (radio and dropdown).

    `brackets` is the pair of characters drawn around the selection marker.
    """

    options: Tuple[Option, ...] = field(default_factory=tuple)

    brackets: ClassVar[str] = "()"

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(self.options))

    def _render_body(self, responses, fmt):
        answer = self.answer(responses)
        return [
            _option_line(option, _same_answer(answer, option.value), self.brackets, fmt)
            for option in self.options
        ]


@dataclass(frozen=True)
class RadioQuestion(ChoiceQuestion):
    kind: ClassVar[QuestionKind] = QuestionKind.RADIO


@dataclass(frozen=True)
class DropdownQuestion(ChoiceQuestion):
    kind: ClassVar[QuestionKind] = QuestionKind.DROPDOWN
    brackets: ClassVar[str] = "<>"


@dataclass(frozen=True)
class CheckboxQuestion(Question):
    """
    Multiple-answer option list.

    The answer is a list of option values. When enabled, two synthetic
    options follow the declared ones:
        allow_other -> "Other" with value "_"
        allow_none  -> "None of the above" with value "none_of_the_above"
    """

    options: Tuple[Option, ...] = field(default_factory=tuple)
    allow_other: bool = False
    allow_none: bool = False

    kind: ClassVar[QuestionKind] = QuestionKind.CHECKBOX

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(self.options))

    @property
    def all_options(self) -> Tuple[Option, ...]:
        """Declared options followed by the enabled synthetic ones."""
        extra = []
        if self.allow_other:
            extra.append(Option(label="Other", value=OTHER_VALUE))
        if self.allow_none:
            extra.append(Option(label="None of the above", value=NONE_OF_THE_ABOVE_VALUE))
        return self.options + tuple(extra)

    def _render_body(self, responses, fmt):
        answer = self.answer(responses)
        chosen = answer if isinstance(answer, (list, tuple)) else ()
        return [
            _option_line(
                option,
                any(_same_answer(value, option.value) for value in chosen),
                "[]",
                fmt,
            )
            for option in self.all_options
        ]


__all__ = [
    "OTHER_VALUE",
    "NONE_OF_THE_ABOVE_VALUE",
    "QuestionKind",
    "Option",
    "Question",
    "TextQuestion",
    "BooleanQuestion",
    "ChoiceQuestion",
    "RadioQuestion",
    "DropdownQuestion",
    "CheckboxQuestion",
]
