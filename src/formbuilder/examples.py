"""
Example questionnaire configurations.

Two small questionnaires exercising every question kind, presets and all
four condition kinds. The same documents ship as YAML under config/.
"""
from copy import deepcopy
from typing import Any, Dict, List

from .builder import build_questionnaire
from .questionnaire import Questionnaire


PERSONAL_INFORMATION: Dict[str, Any] = {
    "id": "personal_information",
    "title": "Personal Information",
    "questions": [
        {
            "id": "name",
            "type": "text",
            "text": "What is your name?",
            "min_length": 2,
            "max_length": 100,
        },
        {
            "id": "have_alias",
            "type": "boolean",
            "text": "Do you have an alias?",
        },
        {
            "id": "alias",
            "type": "text",
            "text": "What is your alias?",
            "max_length": 200,
            "visibility": {
                "type": "value_check",
                "question_id": "have_alias",
                "question_text": "Do you have an alias?",
                "expected_value": True,
            },
        },
        {
            "id": "gender",
            "type": "radio",
            "text": "What is your gender?",
            "preset": "genders",
        },
        {
            "id": "ethnicity",
            "type": "checkbox",
            "text": "Which ethnicities apply to you?",
            "preset": "ethnicities",
            "allow_other": True,
            "allow_none": True,
        },
    ],
}


ABOUT_THE_SITUATION: Dict[str, Any] = {
    "id": "about_the_situation",
    "title": "About the Situation",
    "questions": [
        {
            "id": "which_situation",
            "type": "radio",
            "text": "Which situation best applies to you?",
            "options": [
                {"label": "Domestic violence", "value": "dv"},
                {"label": "Sexual assault", "value": "sa"},
                {"label": "Something else", "value": "other", "show_value": False},
            ],
        },
        {
            "id": "live_in_us",
            "type": "boolean",
            "text": "Do you live in the US?",
        },
        {
            "id": "state",
            "type": "dropdown",
            "text": "What state do you live in?",
            "preset": "us_states",
            "visibility": {
                "type": "value_check",
                "question_id": "live_in_us",
                "question_text": "Do you live in the US?",
                "expected_value": True,
            },
        },
        {
            "id": "country",
            "type": "dropdown",
            "text": "What country do you live in?",
            "preset": "countries",
            "visibility": {
                "type": "value_check",
                "question_id": "live_in_us",
                "question_text": "Do you live in the US?",
                "expected_value": False,
            },
        },
        {
            "id": "need_shelter",
            "type": "boolean",
            "text": "Do you need emergency shelter?",
            "visibility": {
                "type": "and",
                "conditions": [
                    {
                        "type": "value_check",
                        "question_id": "live_in_us",
                        "question_text": "Do you live in the US?",
                        "expected_value": True,
                    },
                    {
                        "type": "value_check",
                        "question_id": "which_situation",
                        "question_text": "Which situation best applies to you?",
                        "expected_value": "dv",
                    },
                ],
            },
        },
        {
            "id": "support_types",
            "type": "checkbox",
            "text": "What kind of support are you looking for?",
            "options": [
                {"label": "Legal advice", "value": "legal"},
                {"label": "Counselling", "value": "counselling"},
                {"label": "Housing", "value": "housing"},
            ],
            "allow_other": True,
            "visibility": {
                "type": "or",
                "conditions": [
                    {
                        "type": "value_check",
                        "question_id": "which_situation",
                        "question_text": "Which situation best applies to you?",
                        "expected_value": "dv",
                    },
                    {
                        "type": "value_check",
                        "question_id": "which_situation",
                        "question_text": "Which situation best applies to you?",
                        "expected_value": "sa",
                    },
                ],
            },
        },
        {
            "id": "other_details",
            "type": "text",
            "text": "Tell us more about your situation.",
            "max_length": 500,
            "visibility": {
                "type": "not",
                "condition": {
                    "type": "or",
                    "conditions": [
                        {
                            "type": "value_check",
                            "question_id": "which_situation",
                            "question_text": "Which situation best applies to you?",
                            "expected_value": "dv",
                        },
                        {
                            "type": "value_check",
                            "question_id": "which_situation",
                            "question_text": "Which situation best applies to you?",
                            "expected_value": "sa",
                        },
                    ],
                },
            },
        },
    ],
}


def example_configs() -> List[Dict[str, Any]]:
    """Fresh copies of the example documents, safe to modify."""
    return [deepcopy(PERSONAL_INFORMATION), deepcopy(ABOUT_THE_SITUATION)]


def build_example_questionnaires() -> List[Questionnaire]:
    return [build_questionnaire(config) for config in example_configs()]
