from __future__ import annotations

from typing import List, Optional


class FormBuilderError(Exception):
    # Base class for all formbuilder failures.
    pass


class ConfigLoadError(FormBuilderError):
    # Raised when a configuration or responses file is missing or not valid YAML.
    pass


class ConfigValidationError(FormBuilderError):
    # Raised when a configuration document fails schema validation.
    def __init__(self, errors: List[str], source: Optional[str] = None):
        self.errors = list(errors)
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(
            f"Configuration validation failed{where}:\n" + "\n".join(self.errors)
        )


class UnknownQuestionType(FormBuilderError):
    # Raised at build time when a question `type` has no registered factory.
    def __init__(self, tag: object):
        self.tag = tag
        super().__init__(f"Unknown question type: {tag}")


class UnknownConditionType(FormBuilderError):
    # Raised at build time when a visibility `type` has no registered factory.
    def __init__(self, tag: object):
        self.tag = tag
        super().__init__(f"Unknown visibility condition type: {tag}")


class UnknownPreset(FormBuilderError):
    # Raised for an unrecognized preset name, only when strict presets are on.
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown preset: {name}")
