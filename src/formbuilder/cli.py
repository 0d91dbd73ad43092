"""
Command-line entry point.

    formbuilder --config a.yaml,b.yaml --responses responses.yaml
    formbuilder --config a.yaml,b.yaml --interactive

Exit codes:
    0  success
    1  a file could not be loaded, validated or built
    2  usage error
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .analyzer import analyze_questionnaire
from .config import COLOR_MODES, Settings
from .errors import FormBuilderError
from .formatting import FormatConfig
from .interactive import run_interactive
from .logging import setup_logging
from .renderer import render_all
from .serialization import load_questionnaires, load_responses, responses_to_yaml


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formbuilder",
        description="Render conditional questionnaires from YAML configuration.",
    )
    parser.add_argument(
        "--config",
        required=True,
        help="Comma-separated list of questionnaire config files",
    )
    parser.add_argument(
        "--responses",
        help="Path to responses YAML file (optional in interactive mode)",
    )
    parser.add_argument("--interactive", action="store_true", help="Run in interactive mode")
    parser.add_argument(
        "--no-validate",
        dest="validate",
        action="store_false",
        default=None,
        help="Skip schema validation of config files",
    )
    parser.add_argument(
        "--strict-presets",
        dest="strict_presets",
        action="store_true",
        default=None,
        help="Fail on unknown preset names instead of using an empty option list",
    )
    parser.add_argument("--color", choices=COLOR_MODES, default=None, help="Colour output")
    parser.add_argument(
        "--analyze",
        action="store_true",
        help="Report dependency and option warnings for each questionnaire",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (e.g. DEBUG, INFO)")
    return parser


def _split_paths(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _ask_on_stderr(prompt: str) -> str:
    # Dialogue goes to stderr; stdout carries only the collected responses.
    sys.stderr.write(prompt)
    sys.stderr.flush()
    return input()


def _say_on_stderr(line: str) -> None:
    print(line, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.interactive and args.responses is None:
        parser.error("--responses is required when not in interactive mode")

    settings = Settings.from_env().override(
        log_level=args.log_level,
        color=args.color,
        validate=args.validate,
        strict_presets=args.strict_presets,
    )
    setup_logging(settings.log_level, json_logs=settings.log_json)

    fmt = FormatConfig.for_stream(settings.color, sys.stdout)
    err_fmt = FormatConfig.for_stream(settings.color, sys.stderr)

    config_paths = _split_paths(args.config)
    if not config_paths:
        parser.error("--config needs at least one file")

    try:
        questionnaires = load_questionnaires(
            config_paths, validate=settings.validate, strict_presets=settings.strict_presets
        )
        all_responses = None if args.interactive else load_responses(args.responses)
    except FormBuilderError as exc:
        logger.debug("Load failed", exc_info=True)
        print(err_fmt.style(f"Error: {exc}", "error"), file=sys.stderr)
        return 1

    if args.analyze:
        for questionnaire in questionnaires:
            report = analyze_questionnaire(questionnaire)
            logger.info(
                "Analyzed %s: %d warning(s)",
                questionnaire.id,
                len(report.warnings),
                extra={"questionnaire_id": questionnaire.id},
            )
            for warning in report.warnings:
                print(err_fmt.style(f"Warning [{questionnaire.id}]: {warning}", "warning"), file=sys.stderr)

    if args.interactive:
        collected = run_interactive(
            questionnaires, err_fmt, input_fn=_ask_on_stderr, output_fn=_say_on_stderr
        )
        print(responses_to_yaml(collected), end="")
        return 0

    print(render_all(questionnaires, all_responses, fmt), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
