"""
Plain-text renderer for questionnaires.

Output layout:

    **PERSONAL INFORMATION**

    1. What is your name? (text question)
       You can enter at most <100> characters.

    2. Do you have an alias? (boolean question)
       - (x) Yes (value: true)
       - ( ) No (value: false)

Only visible questions are printed and only they consume a number.
Colour is decided by the FormatConfig passed in, never by global state.
"""

from typing import Any, Iterable, Mapping, Optional

from .formatting import FormatConfig
from .questionnaire import Questionnaire


def render_title(questionnaire: Questionnaire, fmt: FormatConfig = FormatConfig()) -> str:
    return fmt.style(f"**{questionnaire.title.upper()}**", "title")


def render_questionnaire(
    questionnaire: Questionnaire,
    responses: Mapping[str, Any],
    fmt: FormatConfig = FormatConfig(),
) -> str:
    """
    Render the visible questions of one questionnaire.

    Args:
        questionnaire: questionnaire to render
        responses: flat snapshot (question id -> answer) for this questionnaire
        fmt: formatting options

    Returns:
        Newline-delimited text
    """
    parts = [f"{render_title(questionnaire, fmt)}\n\n"]
    for number, question in enumerate(questionnaire.visible_questions(responses), start=1):
        parts.append(f"{fmt.style(f'{number}.', 'number')} {question.render(responses, fmt)}\n")
    return "".join(parts)


def render_all(
    questionnaires: Iterable[Questionnaire],
    all_responses: Optional[Mapping[str, Any]],
    fmt: FormatConfig = FormatConfig(),
) -> str:
    """
    Render several questionnaires from one combined responses document
    shaped as {questionnaire_id: {question_id: answer}}.
    """
    return "".join(
        render_questionnaire(q, q.responses_for(all_responses), fmt) for q in questionnaires
    )


__all__ = ["render_title", "render_questionnaire", "render_all"]
