"""
Questionnaire Builder (configuration -> typed model).

Turns a configuration document (already shape-checked by
formbuilder.schema) into a Questionnaire with typed questions and
condition trees.

Configuration format:
    id: personal_information
    title: Personal Information
    questions:
      - id: have_alias
        type: boolean
        text: Do you have an alias?
      - id: alias
        type: text
        text: What is your alias?
        max_length: 200
        visibility:
          type: value_check
          question_id: have_alias
          question_text: Do you have an alias?
          expected_value: true

Type tags are resolved through two lookup tables, one for questions and
one for conditions. Adding a kind means adding a table entry.

Failure is all-or-nothing: an unknown tag anywhere aborts the build.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from .conditions import (
    AndCondition,
    Condition,
    ConditionKind,
    NotCondition,
    OrCondition,
    ValueCheck,
)
from .errors import UnknownConditionType, UnknownPreset, UnknownQuestionType
from .presets import get_preset, has_preset
from .questionnaire import Questionnaire
from .questions import (
    BooleanQuestion,
    CheckboxQuestion,
    DropdownQuestion,
    Option,
    Question,
    QuestionKind,
    RadioQuestion,
    TextQuestion,
)


logger = logging.getLogger(__name__)


def parse_options(entries: Optional[List[Mapping[str, Any]]]) -> List[Option]:
    """Option entries -> Option objects. Only an explicit `show_value: false` hides the value."""
    if not entries:
        return []
    return [
        Option(
            label=entry["label"],
            value=entry["value"],
            show_value=entry.get("show_value") is not False,
        )
        for entry in entries
    ]


class QuestionnaireBuilder:
    """
    Builds Questionnaire objects from configuration dicts.

    Args:
        strict_presets: raise UnknownPreset for an unrecognized preset name
            instead of substituting an empty option list
    """

    QUESTION_FACTORIES: Dict[str, Callable[["QuestionnaireBuilder", Mapping[str, Any], Optional[Condition]], Question]]
    CONDITION_FACTORIES: Dict[str, Callable[["QuestionnaireBuilder", Mapping[str, Any]], Condition]]

    def __init__(self, strict_presets: bool = False):
        self.strict_presets = strict_presets

    # =========================================================================
    # QUESTIONNAIRE
    # =========================================================================

    def build(self, config: Mapping[str, Any]) -> Questionnaire:
        """
        Build a Questionnaire from a configuration document.

        Raises:
            UnknownQuestionType: a question `type` has no factory
            UnknownConditionType: a visibility `type` has no factory
            UnknownPreset: unknown preset name with strict_presets on
        """
        logger.debug("Building questionnaire %r", config.get("id"))
        questions = [self.build_question(entry) for entry in config.get("questions") or []]
        questionnaire = Questionnaire(
            id=config["id"],
            title=config["title"],
            questions=questions,
        )
        logger.debug(
            "Built questionnaire %r with %d questions",
            questionnaire.id,
            len(questionnaire.questions),
            extra={"questionnaire_id": questionnaire.id},
        )
        return questionnaire

    # =========================================================================
    # QUESTIONS
    # =========================================================================

    def build_question(self, entry: Mapping[str, Any]) -> Question:
        tag = entry.get("type")
        factory = self.QUESTION_FACTORIES.get(tag)
        if factory is None:
            raise UnknownQuestionType(tag)
        visibility = self.build_condition(entry.get("visibility"))
        return factory(self, entry, visibility)

    def resolve_options(self, entry: Mapping[str, Any]) -> List[Option]:
        """A declared preset wins over literal options."""
        preset = entry.get("preset")
        if preset:
            if self.strict_presets and not has_preset(preset):
                raise UnknownPreset(preset)
            return get_preset(preset)
        return parse_options(entry.get("options"))

    def _text(self, entry, visibility):
        return TextQuestion(
            id=entry["id"],
            text=entry["text"],
            min_length=entry.get("min_length"),
            max_length=entry.get("max_length"),
            visibility=visibility,
        )

    def _boolean(self, entry, visibility):
        return BooleanQuestion(id=entry["id"], text=entry["text"], visibility=visibility)

    def _radio(self, entry, visibility):
        return RadioQuestion(
            id=entry["id"],
            text=entry["text"],
            options=self.resolve_options(entry),
            visibility=visibility,
        )

    def _checkbox(self, entry, visibility):
        return CheckboxQuestion(
            id=entry["id"],
            text=entry["text"],
            options=self.resolve_options(entry),
            allow_other=bool(entry.get("allow_other", False)),
            allow_none=bool(entry.get("allow_none", False)),
            visibility=visibility,
        )

    def _dropdown(self, entry, visibility):
        return DropdownQuestion(
            id=entry["id"],
            text=entry["text"],
            options=self.resolve_options(entry),
            visibility=visibility,
        )

    # =========================================================================
    # CONDITIONS
    # =========================================================================

    def build_condition(self, entry: Optional[Mapping[str, Any]]) -> Optional[Condition]:
        """Recursively build a condition tree; None when no visibility is declared."""
        if entry is None:
            return None
        tag = entry.get("type")
        factory = self.CONDITION_FACTORIES.get(tag)
        if factory is None:
            raise UnknownConditionType(tag)
        return factory(self, entry)

    def _value_check(self, entry):
        return ValueCheck(
            question_id=entry["question_id"],
            expected_value=entry.get("expected_value"),
            question_text=entry.get("question_text"),
        )

    def _and(self, entry):
        return AndCondition(tuple(self.build_condition(c) for c in entry.get("conditions") or []))

    def _or(self, entry):
        return OrCondition(tuple(self.build_condition(c) for c in entry.get("conditions") or []))

    def _not(self, entry):
        return NotCondition(self.build_condition(entry["condition"]))


QuestionnaireBuilder.QUESTION_FACTORIES = {
    QuestionKind.TEXT.value: QuestionnaireBuilder._text,
    QuestionKind.BOOLEAN.value: QuestionnaireBuilder._boolean,
    QuestionKind.RADIO.value: QuestionnaireBuilder._radio,
    QuestionKind.CHECKBOX.value: QuestionnaireBuilder._checkbox,
    QuestionKind.DROPDOWN.value: QuestionnaireBuilder._dropdown,
}

QuestionnaireBuilder.CONDITION_FACTORIES = {
    ConditionKind.VALUE_CHECK.value: QuestionnaireBuilder._value_check,
    ConditionKind.AND.value: QuestionnaireBuilder._and,
    ConditionKind.OR.value: QuestionnaireBuilder._or,
    ConditionKind.NOT.value: QuestionnaireBuilder._not,
}


def build_questionnaire(config: Mapping[str, Any], strict_presets: bool = False) -> Questionnaire:
    return QuestionnaireBuilder(strict_presets=strict_presets).build(config)


__all__ = ["QuestionnaireBuilder", "build_questionnaire", "parse_options"]
