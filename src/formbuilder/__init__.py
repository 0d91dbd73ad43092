"""
formbuilder: conditional questionnaires from declarative configuration.

Pipeline:
    YAML config -> schema validation -> QuestionnaireBuilder -> Questionnaire
    Questionnaire + responses -> visible questions -> plain-text rendering

A question's visibility is a condition tree (value checks combined with
AND / OR / NOT) evaluated against the answers given so far.

ARCHITECTURAL GUARANTEE:
------------------------
The core (conditions, questions, questionnaire, builder, renderer) is pure
and synchronous. It performs no I/O and holds no global state; colour is
an explicit FormatConfig argument.

Loading files, prompting and the command line live in their own modules
(serialization, interactive, cli) on top of the core.
"""

from .builder import QuestionnaireBuilder, build_questionnaire
from .conditions import AndCondition, Condition, ConditionKind, NotCondition, OrCondition, ValueCheck
from .errors import (
    ConfigLoadError,
    ConfigValidationError,
    FormBuilderError,
    UnknownConditionType,
    UnknownPreset,
    UnknownQuestionType,
)
from .formatting import FormatConfig
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
from .renderer import render_all, render_questionnaire

__version__ = "0.1.0"

__all__ = [
    "QuestionnaireBuilder",
    "build_questionnaire",
    "AndCondition",
    "Condition",
    "ConditionKind",
    "NotCondition",
    "OrCondition",
    "ValueCheck",
    "ConfigLoadError",
    "ConfigValidationError",
    "FormBuilderError",
    "UnknownConditionType",
    "UnknownPreset",
    "UnknownQuestionType",
    "FormatConfig",
    "Questionnaire",
    "BooleanQuestion",
    "CheckboxQuestion",
    "DropdownQuestion",
    "Option",
    "Question",
    "QuestionKind",
    "RadioQuestion",
    "TextQuestion",
    "render_all",
    "render_questionnaire",
]
