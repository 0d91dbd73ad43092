"""
Test the bundled example questionnaires.

Checks that the Python documents, the YAML files under config/ and the
built questionnaires agree.
"""

from pathlib import Path

from formbuilder.conditions import AndCondition, NotCondition, OrCondition, ValueCheck
from formbuilder.examples import (
    ABOUT_THE_SITUATION,
    PERSONAL_INFORMATION,
    build_example_questionnaires,
    example_configs,
)
from formbuilder.questions import CheckboxQuestion, DropdownQuestion, RadioQuestion
from formbuilder.serialization import load_config


CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


def test_yaml_files_match_python_documents():
    assert load_config(CONFIG_DIR / "personal_information.yaml") == PERSONAL_INFORMATION
    assert load_config(CONFIG_DIR / "about_the_situation.yaml") == ABOUT_THE_SITUATION


def test_example_configs_are_copies():
    first, _ = example_configs()
    first["questions"].clear()
    assert len(PERSONAL_INFORMATION["questions"]) == 5


def test_personal_information_structure():
    personal, _ = build_example_questionnaires()
    assert [q.id for q in personal.questions] == ["name", "have_alias", "alias", "gender", "ethnicity"]

    gender = personal.get_question("gender")
    assert isinstance(gender, RadioQuestion)
    assert [o.value for o in gender.options] == ["male", "female", "x"]

    ethnicity = personal.get_question("ethnicity")
    assert isinstance(ethnicity, CheckboxQuestion)
    assert ethnicity.allow_other and ethnicity.allow_none


def test_situation_uses_every_condition_kind():
    _, situation = build_example_questionnaires()
    assert isinstance(situation.get_question("state"), DropdownQuestion)
    assert isinstance(situation.get_question("state").visibility, ValueCheck)
    assert isinstance(situation.get_question("need_shelter").visibility, AndCondition)
    assert isinstance(situation.get_question("support_types").visibility, OrCondition)
    assert isinstance(situation.get_question("other_details").visibility, NotCondition)


def test_situation_paths():
    _, situation = build_example_questionnaires()

    def visible(responses):
        return [q.id for q in situation.visible_questions(responses)]

    assert visible({}) == ["which_situation", "live_in_us", "other_details"]
    assert visible({"which_situation": "dv", "live_in_us": True}) == [
        "which_situation",
        "live_in_us",
        "state",
        "need_shelter",
        "support_types",
    ]
    assert visible({"which_situation": "other", "live_in_us": False}) == [
        "which_situation",
        "live_in_us",
        "country",
        "other_details",
    ]
