"""
Schema validation for questionnaire configuration documents.

Runs before the builder and rejects structurally invalid documents:
missing required fields, unknown enum values, malformed conditions,
duplicate question ids. The builder assumes a document that passed here.
"""
from __future__ import annotations

import logging
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import ConfigValidationError


logger = logging.getLogger(__name__)


Scalar = Union[bool, int, float, str, None]

QuestionType = Literal["text", "boolean", "radio", "checkbox", "dropdown"]
ConditionType = Literal["value_check", "and", "or", "not"]


class OptionSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    label: str
    value: Union[bool, int, float, str]
    show_value: bool = True


class ConditionSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: ConditionType
    question_id: Optional[str] = None
    question_text: Optional[str] = None
    expected_value: Scalar = None
    conditions: Optional[List["ConditionSpec"]] = None
    condition: Optional["ConditionSpec"] = None

    @model_validator(mode="after")
    def _check_fields_for_type(self) -> "ConditionSpec":
        if self.type == "value_check":
            if not self.question_id:
                raise ValueError("value_check condition requires 'question_id'")
            if "expected_value" not in self.model_fields_set:
                raise ValueError("value_check condition requires 'expected_value'")
        elif self.type in ("and", "or"):
            if self.conditions is None:
                raise ValueError(f"{self.type} condition requires 'conditions'")
        elif self.condition is None:
            raise ValueError("not condition requires 'condition'")
        return self


ConditionSpec.model_rebuild()


class QuestionSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    type: QuestionType
    text: str
    visibility: Optional[ConditionSpec] = None

    # text
    min_length: Optional[int] = Field(default=None, ge=0)
    max_length: Optional[int] = Field(default=None, ge=0)

    # radio / checkbox / dropdown
    options: Optional[List[OptionSpec]] = None
    preset: Optional[str] = None

    # checkbox
    allow_other: bool = False
    allow_none: bool = False

    @model_validator(mode="after")
    def _check_length_bounds(self) -> "QuestionSpec":
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError("min_length must not exceed max_length")
        return self


class QuestionnaireSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    title: str
    questions: List[QuestionSpec]

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "QuestionnaireSpec":
        seen = set()
        duplicates = []
        for question in self.questions:
            if question.id in seen and question.id not in duplicates:
                duplicates.append(question.id)
            seen.add(question.id)
        if duplicates:
            raise ValueError(f"duplicate question ids: {', '.join(duplicates)}")
        return self


def _format_errors(exc: ValidationError) -> List[str]:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        messages.append(f"{location}: {err['msg']}")
    return messages


def validate_config(config: Any, source: Optional[str] = None) -> QuestionnaireSpec:
    """
    Validate a raw configuration document.

    Args:
        config: parsed document (normally a dict loaded from YAML)
        source: optional file name used in error messages

    Returns:
        The validated QuestionnaireSpec

    Raises:
        ConfigValidationError: with one message per problem found
    """
    if not isinstance(config, dict):
        raise ConfigValidationError(["<root>: configuration must be a mapping"], source=source)
    try:
        return QuestionnaireSpec.model_validate(config)
    except ValidationError as exc:
        errors = _format_errors(exc)
        logger.warning("Configuration %s failed validation with %d error(s)", source or "<memory>", len(errors))
        raise ConfigValidationError(errors, source=source) from exc


def is_valid_config(config: Any) -> bool:
    try:
        validate_config(config)
    except ConfigValidationError:
        return False
    return True


__all__ = [
    "OptionSpec",
    "ConditionSpec",
    "QuestionSpec",
    "QuestionnaireSpec",
    "validate_config",
    "is_valid_config",
]
