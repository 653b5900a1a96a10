from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Sequence

from cellplot.cells.symbols import COLOR_WHITE, STANDARD_COLORS


@dataclass(frozen=True)
class PlotTheme:
    """Default colours handed to a plot at construction time."""

    lines: tuple[int, ...] = STANDARD_COLORS
    axes: int = COLOR_WHITE


DEFAULT_THEME = PlotTheme()


def validate_theme(overrides: Mapping[str, Any] | None = None) -> PlotTheme:
    """Validate and merge theme overrides against ``DEFAULT_THEME``."""

    raw: dict[str, Any] = asdict(DEFAULT_THEME)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    lines = raw["lines"]
    if isinstance(lines, (str, bytes)) or not isinstance(lines, Sequence) or not lines:
        raise ValueError("Token `lines` must be a non-empty sequence of colors")
    for color in lines:
        validate_color(color, name="lines")
    validate_color(raw["axes"], name="axes")

    return PlotTheme(lines=tuple(int(c) for c in lines), axes=int(raw["axes"]))


def validate_color(color: Any, *, name: str) -> int:
    if isinstance(color, bool) or not isinstance(color, int) or not -1 <= color <= 255:
        raise ValueError(f"Token `{name}` must hold 256-color indices in [-1, 255], got {color!r}")
    return color


def select_color(colors: Sequence[int], index: int) -> int:
    return colors[index % len(colors)]
