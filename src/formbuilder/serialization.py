"""
YAML loading for questionnaire configurations and response documents.

Configuration files go through schema validation (optional) and then the
builder. Response files are plain mappings of
{questionnaire_id: {question_id: answer}}.

Nothing here writes files.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from .builder import QuestionnaireBuilder
from .errors import ConfigLoadError
from .questionnaire import Questionnaire
from .schema import validate_config


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _parse_yaml(text: str, source: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"Invalid YAML in {source}: {exc}") from exc


def _read_yaml(path: PathLike) -> Any:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigLoadError(f"File not found: {path}")
    except OSError as exc:
        raise ConfigLoadError(f"Cannot read {path}: {exc}") from exc
    return _parse_yaml(text, str(path))


def load_config(path: PathLike) -> Dict[str, Any]:
    """Read a configuration document without validating or building it."""
    data = _read_yaml(path)
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Configuration in {path} must be a mapping")
    return data


def load_responses(path: PathLike) -> Dict[str, Any]:
    """
    Read a responses document. An empty file is an empty mapping.
    """
    data = _read_yaml(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Responses in {path} must be a mapping")
    return data


def questionnaire_from_config(
    config: Dict[str, Any],
    validate: bool = True,
    strict_presets: bool = False,
    source: Optional[str] = None,
) -> Questionnaire:
    if validate:
        validate_config(config, source=source)
    return QuestionnaireBuilder(strict_presets=strict_presets).build(config)


def questionnaire_from_yaml(text: str, validate: bool = True, strict_presets: bool = False) -> Questionnaire:
    config = _parse_yaml(text, "<string>")
    if not isinstance(config, dict):
        raise ConfigLoadError("Configuration must be a mapping")
    return questionnaire_from_config(config, validate=validate, strict_presets=strict_presets)


def load_questionnaire(path: PathLike, validate: bool = True, strict_presets: bool = False) -> Questionnaire:
    """
    Load, optionally validate, and build one questionnaire file.

    Raises:
        ConfigLoadError: file missing or not YAML
        ConfigValidationError: schema validation failed
        UnknownQuestionType / UnknownConditionType / UnknownPreset: build failed
    """
    logger.debug("Loading questionnaire from %s", path)
    config = load_config(path)
    return questionnaire_from_config(
        config, validate=validate, strict_presets=strict_presets, source=str(path)
    )


def load_questionnaires(
    paths: Iterable[PathLike], validate: bool = True, strict_presets: bool = False
) -> List[Questionnaire]:
    return [load_questionnaire(p, validate=validate, strict_presets=strict_presets) for p in paths]


def responses_to_yaml(responses: Dict[str, Any]) -> str:
    return yaml.safe_dump(responses, sort_keys=False, allow_unicode=True)


__all__ = [
    "load_config",
    "load_responses",
    "questionnaire_from_config",
    "questionnaire_from_yaml",
    "load_questionnaire",
    "load_questionnaires",
    "responses_to_yaml",
]
