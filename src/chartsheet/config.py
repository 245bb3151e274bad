"""Render options and their JSON config file.

Example ``chartsheet.json``::

    {"font_size": 18, "suffix_scale": 0.65}

Keys left out keep their defaults.
"""

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path

from .exceptions import ConfigError


@dataclass(frozen=True)
class RenderOptions:
    font_size: float = 14  # px
    tab_size: int = 8
    label_scale: float = 0.85  # section label, relative to font_size
    shrink_scale: float = 0.75  # ~smaller~ text
    suffix_scale: float = 0.7  # chord suffix superscript
    suffix_raise: float = 0.45  # em
    empty_line_height: float = 1.0  # em


def default_options() -> RenderOptions:
    return RenderOptions()


def load_options(path: str | Path, base: RenderOptions | None = None) -> RenderOptions:
    """Read a JSON options file and apply it over *base* (defaults if omitted).

    Raises ConfigError if the file is unreadable, not a JSON object, names
    an unknown option, or gives a non-numeric value.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(str(path), exc.strerror or "cannot read file") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(str(path), f"invalid JSON ({exc.msg})") from exc

    if not isinstance(data, dict):
        raise ConfigError(str(path), "expected a JSON object")

    known = {f.name: f for f in fields(RenderOptions)}
    overrides = {}
    for key, value in data.items():
        if key not in known:
            raise ConfigError(str(path), f"unknown option {key!r}")
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(str(path), f"{key} must be a number")
        if value <= 0:
            raise ConfigError(str(path), f"{key} must be positive")
        overrides[key] = int(value) if key == "tab_size" else value

    return replace(base or default_options(), **overrides)
