"""
Input handlers for interactive answering.

One handler per question kind. A handler knows how to:
    - describe the choices (menu lines shown before the prompt)
    - validate a raw line typed by the respondent
    - parse a valid line into the stored answer
    - explain what went wrong

Handlers do no I/O themselves; InteractiveRunner owns the terminal.
"""

import re
from typing import Any, Dict, List, Type

from .errors import UnknownQuestionType
from .questions import (
    CheckboxQuestion,
    ChoiceQuestion,
    Option,
    Question,
    QuestionKind,
    TextQuestion,
)


_NUMBER_RE = re.compile(r"^\d+$")


class InputHandler:
    """Base handler. Subclasses override prompt, validate and parse."""

    def __init__(self, question: Question):
        self.question = question

    def answerable(self) -> bool:
        """False when no input could ever validate (a choice list with no options)."""
        return True

    def menu_lines(self) -> List[str]:
        return []

    def prompt(self) -> str:
        raise NotImplementedError

    def validate(self, raw: str) -> bool:
        raise NotImplementedError

    def parse(self, raw: str) -> Any:
        raise NotImplementedError

    def error_message(self) -> str:
        return "Invalid input"


class TextInputHandler(InputHandler):
    question: TextQuestion

    def menu_lines(self):
        constraints = []
        if self.question.min_length is not None:
            constraints.append(f"min {self.question.min_length} chars")
        if self.question.max_length is not None:
            constraints.append(f"max {self.question.max_length} chars")
        return [f"  ({', '.join(constraints)})"] if constraints else []

    def prompt(self):
        return "> "

    def validate(self, raw):
        if self.question.min_length is not None and len(raw) < self.question.min_length:
            return False
        if self.question.max_length is not None and len(raw) > self.question.max_length:
            return False
        return True

    def parse(self, raw):
        return raw

    def error_message(self):
        errors = []
        if self.question.min_length is not None:
            errors.append(f"Minimum {self.question.min_length} characters")
        if self.question.max_length is not None:
            errors.append(f"Maximum {self.question.max_length} characters")
        return ", ".join(errors) or super().error_message()


class BooleanInputHandler(InputHandler):
    TRUE_WORDS = ("y", "yes", "1", "true")
    FALSE_WORDS = ("n", "no", "2", "false")

    def prompt(self):
        return "> (y/n): "

    def validate(self, raw):
        word = raw.strip().lower()
        return word in self.TRUE_WORDS or word in self.FALSE_WORDS

    def parse(self, raw):
        return raw.strip().lower() in self.TRUE_WORDS

    def error_message(self):
        return "Enter 'y' or 'n'"


def _numbered(options: List[Option]) -> List[str]:
    return [f"  {index}. {option.label}" for index, option in enumerate(options, start=1)]


class SingleChoiceInputHandler(InputHandler):
    """Radio and dropdown: one 1-based option number."""

    question: ChoiceQuestion

    def answerable(self):
        return bool(self.question.options)

    def menu_lines(self):
        return _numbered(list(self.question.options))

    def prompt(self):
        return f"> Number (1-{len(self.question.options)}): "

    def validate(self, raw):
        raw = raw.strip()
        if not _NUMBER_RE.match(raw):
            return False
        return 1 <= int(raw) <= len(self.question.options)

    def parse(self, raw):
        return self.question.options[int(raw.strip()) - 1].value

    def error_message(self):
        return f"Select number between 1 and {len(self.question.options)}"


class CheckboxInputHandler(InputHandler):
    """Comma-separated 1-based numbers over declared and synthetic options."""

    question: CheckboxQuestion

    def _choices(self) -> List[Option]:
        return list(self.question.all_options)

    def answerable(self):
        return bool(self._choices())

    def menu_lines(self):
        return _numbered(self._choices())

    def prompt(self):
        return "> Numbers separated by comma (e.g., 1,3,5): "

    def validate(self, raw):
        if not raw.strip():
            return False
        count = len(self._choices())
        numbers = [part.strip() for part in raw.split(",")]
        return all(_NUMBER_RE.match(n) and 1 <= int(n) <= count for n in numbers)

    def parse(self, raw):
        choices = self._choices()
        return [choices[int(part.strip()) - 1].value for part in raw.split(",")]

    def error_message(self):
        return "Enter valid numbers separated by comma"


HANDLERS: Dict[QuestionKind, Type[InputHandler]] = {
    QuestionKind.TEXT: TextInputHandler,
    QuestionKind.BOOLEAN: BooleanInputHandler,
    QuestionKind.RADIO: SingleChoiceInputHandler,
    QuestionKind.DROPDOWN: SingleChoiceInputHandler,
    QuestionKind.CHECKBOX: CheckboxInputHandler,
}


def handler_for(question: Question) -> InputHandler:
    """
    Pick the input handler for a question.

    Raises:
        UnknownQuestionType: the question's kind has no handler
    """
    kind = getattr(question, "kind", None)
    handler_cls = HANDLERS.get(kind)
    if handler_cls is None:
        raise UnknownQuestionType(kind)
    return handler_cls(question)


__all__ = [
    "InputHandler",
    "TextInputHandler",
    "BooleanInputHandler",
    "SingleChoiceInputHandler",
    "CheckboxInputHandler",
    "HANDLERS",
    "handler_for",
]
