"""
Demo: Run the analyzer on the example questionnaires and print the reports.
"""

from formbuilder.examples import build_example_questionnaires
from formbuilder.analyzer import analyze_questionnaire
from formbuilder.serialization import responses_to_yaml


def print_report(report):
    """Pretty-print a QuestionnaireReport."""
    print()
    print("=" * 70)
    print(f"QUESTIONNAIRE ANALYSIS REPORT: {report.questionnaire_id}")
    print("=" * 70)
    print()

    print("📊 BASIC METRICS")
    print(f"  Total Questions:       {report.total_questions}")
    for kind, count in sorted(report.questions_by_kind.items()):
        print(f"    {kind}: {count}")
    print(f"  Conditional Questions: {report.conditional_questions}")
    print()

    print("📐 CONDITION COMPLEXITY")
    print(f"  Max Condition Depth:   {report.max_condition_depth}")
    print(f"  Total Condition Nodes: {report.total_condition_nodes}")
    print()

    print("🔗 DEPENDENCIES")
    print(f"  Unknown References:    {report.unknown_references or 'None'}")
    print(f"  Forward References:    {report.forward_references or 'None'}")
    print(f"  Without Options:       {report.questions_without_options or 'None'}")
    print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS - Questionnaire looks clean!")
    print()


if __name__ == "__main__":
    questionnaires = build_example_questionnaires()

    for questionnaire in questionnaires:
        print_report(analyze_questionnaire(questionnaire))

    # Dump an empty response skeleton for filling in by hand
    skeleton = {q.id: {question.id: None for question in q.questions} for q in questionnaires}
    with open("example_responses_skeleton.yaml", "w") as f:
        f.write(responses_to_yaml(skeleton))
    print("✅ Response skeleton exported to example_responses_skeleton.yaml")
