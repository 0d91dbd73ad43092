"""
Interactive runner: asks the visible questions of one or more
questionnaires on a terminal and collects the answers.

Visibility is re-evaluated before every question against the answers
collected so far, so later questions appear or disappear as the
respondent answers earlier ones. Numbering runs across all
questionnaires. Nothing is written to disk; the caller decides what to do
with the returned responses.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from .formatting import FormatConfig
from .input_handlers import InputHandler, handler_for
from .questionnaire import Questionnaire
from .questions import Question
from .renderer import render_title


logger = logging.getLogger(__name__)


class InteractiveRunner:
    """
    Args:
        questionnaires: questionnaires to run, in order
        fmt: formatting options for prompts and messages
        input_fn: reads one line given a prompt (defaults to builtin input)
        output_fn: writes one line (defaults to builtin print)
    """

    def __init__(
        self,
        questionnaires: Sequence[Questionnaire],
        fmt: FormatConfig = FormatConfig(),
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.questionnaires = list(questionnaires)
        self.fmt = fmt
        self._input = input_fn if input_fn is not None else input
        self._output = output_fn if output_fn is not None else print
        self.responses: Dict[str, Dict[str, Any]] = {}
        self.question_counter = 0

    def run(self) -> Dict[str, Dict[str, Any]]:
        """Ask every questionnaire in turn; return {questionnaire_id: {question_id: answer}}."""
        for questionnaire in self.questionnaires:
            self.run_questionnaire(questionnaire)
        return self.responses

    def run_questionnaire(self, questionnaire: Questionnaire) -> Dict[str, Any]:
        self._output("")
        self._output(render_title(questionnaire, self.fmt))
        self._output("")

        answers = self.responses.setdefault(questionnaire.id, {})
        for question in questionnaire.questions:
            if not question.is_visible(answers):
                logger.debug("Skipping hidden question %s.%s", questionnaire.id, question.id)
                continue
            handler = handler_for(question)
            if not handler.answerable():
                logger.warning(
                    "Skipping %s.%s: no options to choose from",
                    questionnaire.id,
                    question.id,
                    extra={"questionnaire_id": questionnaire.id, "question_id": question.id},
                )
                continue
            answers[question.id] = self.ask(question, handler)
        return answers

    def ask(self, question: Question, handler: Optional[InputHandler] = None) -> Any:
        self.question_counter += 1
        number = self.fmt.style(f"{self.question_counter}.", "number")
        self._output(f"{number} {question.text}")

        if handler is None:
            handler = handler_for(question)
        for line in handler.menu_lines():
            self._output(line)

        while True:
            raw = self._input(handler.prompt())
            if handler.validate(raw):
                answer = handler.parse(raw)
                break
            self._output(self.fmt.style(f"  ✗ Error: {handler.error_message()}", "error"))

        self._output(self.fmt.style("  ✓ Saved", "success"))
        self._output("")
        return answer


def run_interactive(
    questionnaires: List[Questionnaire],
    fmt: FormatConfig = FormatConfig(),
    input_fn: Optional[Callable[[str], str]] = None,
    output_fn: Optional[Callable[[str], None]] = None,
) -> Dict[str, Dict[str, Any]]:
    return InteractiveRunner(questionnaires, fmt=fmt, input_fn=input_fn, output_fn=output_fn).run()


__all__ = ["InteractiveRunner", "run_interactive"]
