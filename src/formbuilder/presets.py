"""
Named option lists that configuration can reference with `preset:`
instead of spelling out `options:`.
"""
import logging
from typing import Dict, List, Tuple

from .questions import Option


logger = logging.getLogger(__name__)


PRESETS: Dict[str, Tuple[Option, ...]] = {
    "genders": (
        Option(label="Male", value="male"),
        Option(label="Female", value="female"),
        Option(label="X", value="x", show_value=False),
    ),
    "ethnicities": (
        Option(label="White", value="white"),
        Option(label="Black", value="black"),
        Option(label="Asian", value="asian"),
        Option(label="Hispanic", value="hispanic"),
    ),
    "us_states": (
        Option(label="California", value="ca"),
        Option(label="Florida", value="fl"),
        Option(label="New York", value="ny"),
        Option(label="Texas", value="tx"),
        Option(label="Washington", value="wa"),
    ),
    "countries": (
        Option(label="Canada", value="ca"),
        Option(label="Mexico", value="mx"),
        Option(label="United States", value="us"),
    ),
}


def has_preset(name: str) -> bool:
    return name in PRESETS


def get_preset(name: str) -> List[Option]:
    """
    Return the options for a preset, in canonical order.

    An unknown name yields an empty list. Use has_preset() (or the
    builder's strict_presets flag) to treat that as an error instead.
    """
    options = PRESETS.get(name)
    if options is None:
        logger.warning("Unknown preset %r, using an empty option list", name)
        return []
    return list(options)


def preset_names() -> List[str]:
    return sorted(PRESETS)


__all__ = ["PRESETS", "has_preset", "get_preset", "preset_names"]
