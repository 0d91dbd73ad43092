#!/usr/bin/env python3
"""
Demo: Render the example questionnaires for a few response sets.

Shows how visibility changes as answers change, in plain and coloured output.
"""

from formbuilder.examples import build_example_questionnaires
from formbuilder.formatting import FormatConfig
from formbuilder.renderer import render_all


SCENARIOS = {
    "no answers": {},
    "dv in the US": {
        "personal_information": {"name": "Alex", "have_alias": True, "alias": "AD", "gender": "x"},
        "about_the_situation": {"which_situation": "dv", "live_in_us": True, "state": "ny"},
    },
    "something else, abroad": {
        "about_the_situation": {"which_situation": "other", "live_in_us": False, "country": "mx"},
    },
}


def main():
    questionnaires = build_example_questionnaires()

    print("=" * 80)
    print("RENDER DEMO")
    print("=" * 80)

    for name, responses in SCENARIOS.items():
        print(f"\n{name.upper()}:")
        print("-" * 80)
        print(render_all(questionnaires, responses, FormatConfig.plain()))

    print("\n" + "=" * 80)
    print("COLOURED:")
    print("-" * 80)
    print(render_all(questionnaires, SCENARIOS["dv in the US"], FormatConfig.colored()))
    print("=" * 80)


if __name__ == "__main__":
    main()
