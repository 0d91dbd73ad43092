"""
Tests for the question model.

These tests verify, per question kind:
    - The header line and type label
    - Option lines and selection markers
    - The visibility annotation line
    - Visibility delegation to the condition tree
"""

import pytest
from formbuilder.conditions import AndCondition, NotCondition, OrCondition, ValueCheck
from formbuilder.formatting import FormatConfig
from formbuilder.presets import get_preset
from formbuilder.questions import (
    NONE_OF_THE_ABOVE_VALUE,
    OTHER_VALUE,
    BooleanQuestion,
    CheckboxQuestion,
    DropdownQuestion,
    Option,
    Question,
    QuestionKind,
    RadioQuestion,
    TextQuestion,
)


HAVE_ALIAS = ValueCheck("have_alias", True, question_text="Do you have an alias?")


class TestVisibility:
    """Test is_visible() for every kind."""

    @pytest.mark.parametrize(
        "question",
        [
            TextQuestion(id="q", text="T"),
            BooleanQuestion(id="q", text="T"),
            RadioQuestion(id="q", text="T"),
            CheckboxQuestion(id="q", text="T"),
            DropdownQuestion(id="q", text="T"),
        ],
    )
    def test_visible_without_condition(self, question):
        """A question with no visibility condition is always visible."""
        assert question.is_visible({}) is True
        assert question.is_visible({"anything": 1}) is True

    def test_delegates_to_condition(self):
        question = TextQuestion(id="alias", text="What is your alias?", visibility=HAVE_ALIAS)
        assert question.is_visible({"have_alias": True}) is True
        assert question.is_visible({"have_alias": False}) is False
        assert question.is_visible({}) is False


class TestTextQuestion:
    """Test text question rendering."""

    def test_min_and_max_length(self):
        question = TextQuestion(id="name", text="What is your name?", min_length=10, max_length=100)
        output = question.render({})
        assert "What is your name? (text question)" in output
        assert "You can enter at least <10> characters and at most <100> characters." in output

    def test_only_max_length(self):
        question = TextQuestion(id="alias", text="What is your alias?", max_length=200)
        output = question.render({})
        assert "What is your alias? (text question)" in output
        assert "You can enter at most <200> characters." in output
        assert "at least" not in output

    def test_only_min_length(self):
        question = TextQuestion(id="bio", text="Bio", min_length=5)
        assert "   You can enter at least <5> characters.\n" in question.render({})

    def test_zero_is_a_bound(self):
        question = TextQuestion(id="bio", text="Bio", min_length=0)
        assert "at least <0> characters" in question.render({})

    def test_no_bounds(self):
        """Without bounds only the header line is produced."""
        question = TextQuestion(id="note", text="Anything else?")
        assert question.render({}) == "Anything else? (text question)\n"

    def test_visibility_line(self):
        question = TextQuestion(id="alias", text="What is your alias?", max_length=200, visibility=HAVE_ALIAS)
        assert question.render({}) == (
            "What is your alias? (text question)\n"
            "   You can enter at most <200> characters.\n"
            "   <Visible> Do you have an alias?: true\n"
        )

    def test_kind(self):
        assert TextQuestion(id="q", text="T").kind is QuestionKind.TEXT


class TestBooleanQuestion:
    """Test boolean question rendering."""

    question = BooleanQuestion(id="have_alias", text="Do you have an alias?")

    def test_no_response(self):
        output = self.question.render({})
        assert "Do you have an alias? (boolean question)" in output
        assert "- ( ) Yes (value: true)" in output
        assert "- ( ) No (value: false)" in output

    def test_true_response(self):
        output = self.question.render({"have_alias": True})
        assert "- (x) Yes (value: true)" in output
        assert "- ( ) No (value: false)" in output

    def test_false_response(self):
        output = self.question.render({"have_alias": False})
        assert "- ( ) Yes (value: true)" in output
        assert "- (x) No (value: false)" in output

    def test_values_are_not_quoted(self):
        """Boolean values are shown bare; choice values stay quoted."""
        output = self.question.render({})
        assert "'true'" not in output
        assert "'false'" not in output

    @pytest.mark.parametrize("answer", [1, 0, "true", "yes", None])
    def test_non_boolean_answers_select_nothing(self, answer):
        """Selection needs the actual booleans, not truthy look-alikes."""
        output = self.question.render({"have_alias": answer})
        assert "(x)" not in output

    def test_exactly_two_option_lines(self):
        lines = self.question.render({}).splitlines()
        assert len(lines) == 3


class TestRadioQuestion:
    """Test radio question rendering."""

    question = RadioQuestion(
        id="gender",
        text="What is your gender?",
        options=get_preset("genders"),
    )

    def test_options_in_order(self):
        assert self.question.render({}) == (
            "What is your gender? (radio question)\n"
            "   - ( ) Male (value: 'male')\n"
            "   - ( ) Female (value: 'female')\n"
            "   - ( ) X\n"
        )

    def test_selected_option(self):
        output = self.question.render({"gender": "female"})
        assert "   - (x) Female (value: 'female')" in output
        assert "   - ( ) Male (value: 'male')" in output

    def test_hidden_value_still_selectable(self):
        assert "   - (x) X\n" in self.question.render({"gender": "x"})

    def test_options_stored_as_tuple(self):
        assert isinstance(self.question.options, tuple)

    def test_numeric_option_values(self):
        question = RadioQuestion(id="n", text="How many?", options=[Option("One", 1), Option("Two", 2)])
        output = question.render({"n": 2})
        assert "   - (x) Two (value: '2')" in output
        assert "   - ( ) One (value: '1')" in output

    def test_visibility_line_comes_last(self):
        question = RadioQuestion(
            id="r",
            text="R",
            options=[Option("A", "a")],
            visibility=NotCondition(HAVE_ALIAS),
        )
        assert question.render({}).splitlines()[-1] == "   <Visible> NOT Do you have an alias?: true"


class TestDropdownQuestion:
    """Test dropdown question rendering."""

    situation = AndCondition(
        [
            ValueCheck("live_in_us", True, question_text="Do you live in the US?"),
            ValueCheck("which_situation", "dv", question_text="Which situation best applies to you?"),
        ]
    )
    question = DropdownQuestion(
        id="state",
        text="What state do you live in?",
        options=get_preset("us_states"),
        visibility=situation,
    )

    def test_dropdown_markers(self):
        output = self.question.render({"state": "ny"})
        assert "What state do you live in? (dropdown question)" in output
        assert "   - <x> New York (value: 'ny')" in output
        assert "   - < > Texas (value: 'tx')" in output

    def test_and_tag_on_visibility_line(self):
        lines = self.question.render({}).splitlines()
        assert lines[-2] == "   <AND Visible> Do you live in the US?: true"
        assert lines[-1] == "   <AND Visible> Which situation best applies to you?: dv"

    def test_or_tag_on_visibility_line(self):
        question = DropdownQuestion(
            id="d",
            text="D",
            visibility=OrCondition([ValueCheck("a", 1), ValueCheck("b", 2)]),
        )
        assert question.render({}) == (
            "D (dropdown question)\n"
            "   <OR Visible> a: 1\n"
            "   <OR Visible> b: 2\n"
        )


class TestCheckboxQuestion:
    """Test checkbox question rendering."""

    question = CheckboxQuestion(
        id="ethnicity",
        text="Which ethnicities apply to you?",
        options=get_preset("ethnicities"),
        allow_other=True,
        allow_none=True,
    )

    def test_selected_and_synthetic_options(self):
        """White and Other are ticked, everything else is not."""
        assert self.question.render({"ethnicity": ["white", "_"]}) == (
            "Which ethnicities apply to you? (checkbox question)\n"
            "   - [x] White (value: 'white')\n"
            "   - [ ] Black (value: 'black')\n"
            "   - [ ] Asian (value: 'asian')\n"
            "   - [ ] Hispanic (value: 'hispanic')\n"
            "   - [x] Other (value: '_')\n"
            "   - [ ] None of the above (value: 'none_of_the_above')\n"
        )

    def test_none_of_the_above(self):
        output = self.question.render({"ethnicity": [NONE_OF_THE_ABOVE_VALUE]})
        assert "   - [x] None of the above (value: 'none_of_the_above')" in output
        assert output.count("[x]") == 1

    def test_synthetic_options_are_gated(self):
        question = CheckboxQuestion(id="c", text="C", options=[Option("A", "a")])
        output = question.render({})
        assert "Other" not in output
        assert "None of the above" not in output

    def test_only_other(self):
        question = CheckboxQuestion(id="c", text="C", options=[Option("A", "a")], allow_other=True)
        assert [o.value for o in question.all_options] == ["a", OTHER_VALUE]

    def test_no_response_selects_nothing(self):
        assert "[x]" not in self.question.render({})

    def test_scalar_response_selects_nothing(self):
        """A checkbox answer must be a list."""
        assert "[x]" not in self.question.render({"ethnicity": "white"})

    def test_tuple_response(self):
        assert "[x] Black" in self.question.render({"ethnicity": ("black",)})


class TestRenderProperties:
    """Test rendering guarantees shared by every kind."""

    @pytest.mark.parametrize(
        "question, responses",
        [
            (TextQuestion(id="t", text="T", min_length=1, visibility=HAVE_ALIAS), {"t": "abc"}),
            (BooleanQuestion(id="b", text="B"), {"b": True}),
            (RadioQuestion(id="r", text="R", options=get_preset("countries")), {"r": "mx"}),
            (CheckboxQuestion(id="c", text="C", options=get_preset("ethnicities"), allow_none=True), {"c": ["asian"]}),
            (DropdownQuestion(id="d", text="D", options=get_preset("us_states")), {"d": "wa"}),
        ],
    )
    def test_render_is_deterministic(self, question, responses):
        snapshot = {k: (list(v) if isinstance(v, list) else v) for k, v in responses.items()}
        assert question.render(responses) == question.render(responses)
        assert responses == snapshot

    def test_render_ignores_visibility(self):
        """An invisible question still renders; filtering happens one layer up."""
        question = TextQuestion(id="alias", text="What is your alias?", visibility=HAVE_ALIAS)
        assert not question.is_visible({})
        assert question.render({}).startswith("What is your alias? (text question)")

    def test_colored_render_keeps_text(self):
        question = BooleanQuestion(id="b", text="Sure?")
        output = question.render({"b": True}, FormatConfig.colored())
        assert "\x1b[" in output
        assert "Sure?" in output
        assert "Yes" in output

    def test_plain_render_has_no_escape_codes(self):
        question = BooleanQuestion(id="b", text="Sure?")
        assert "\x1b[" not in question.render({"b": True}, FormatConfig.plain())


class TestQuestionBase:
    """Test the abstract question base."""

    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Question(id="q", text="Q")
