from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional


COLOR_MODES = ("auto", "always", "never")


def _env_str(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    if v is None:
        return default
    v = v.strip()
    return v if v else default


def _env_bool(key: str, default: bool) -> bool:
    v = _env_str(key)
    if v is None:
        return default
    return v.lower() in {"1", "true", "yes", "y", "on"}


def _env_choice(key: str, choices: tuple, default: str) -> str:
    v = _env_str(key)
    if v is None or v.lower() not in choices:
        return default
    return v.lower()


@dataclass(frozen=True)
class Settings:
    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    # Output
    color: str = "auto"

    # Loading
    validate: bool = True
    strict_presets: bool = False

    @staticmethod
    def from_env() -> "Settings":
        # Read configuration from FORMBUILDER_* environment variables.
        return Settings(
            log_level=_env_str("FORMBUILDER_LOG_LEVEL", "WARNING") or "WARNING",
            log_json=_env_bool("FORMBUILDER_LOG_JSON", False),
            color=_env_choice("FORMBUILDER_COLOR", COLOR_MODES, "auto"),
            validate=_env_bool("FORMBUILDER_VALIDATE", True),
            strict_presets=_env_bool("FORMBUILDER_STRICT_PRESETS", False),
        )

    def override(self, **changes) -> "Settings":
        # Apply non-None overrides (typically CLI flags).
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
