from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from pathplot.geometry import Drawable, LineStyle


LOGGER = logging.getLogger(__name__)

BASE_LEGEND_STROKE_LENGTH = 8.0


@dataclass(frozen=True)
class LegendEntry:
    sample: Drawable
    label: Drawable


@dataclass(frozen=True)
class LegendContext:
    """What a series contributes to a legend: nothing, or one sample/label pair."""

    entry: LegendEntry | None = None

    @classmethod
    def empty(cls) -> "LegendContext":
        return cls()

    @classmethod
    def single(cls, sample: Drawable, label: Drawable) -> "LegendContext":
        return cls(LegendEntry(sample=sample, label=label))

    @property
    def is_empty(self) -> bool:
        return self.entry is None


def calc_legend_stroke_length(line_style: LineStyle) -> float:
    """Length of a legend sample line that shows whole periods of the dash pattern.

    Solid lines use the base length. Dashed lines need at least two periods
    (four for a single-entry pattern); short patterns are then extended by
    whole periods toward the base length.
    """
    pattern = line_style.dash_pattern
    if not pattern:
        return BASE_LEGEND_STROKE_LENGTH
    pattern_length = float(sum(pattern))
    if pattern_length <= 0.0:
        return BASE_LEGEND_STROKE_LENGTH

    minimum_length = 4.0 * pattern_length if len(pattern) == 1 else 2.0 * pattern_length
    if minimum_length < BASE_LEGEND_STROKE_LENGTH:
        diff = BASE_LEGEND_STROKE_LENGTH - minimum_length
        multiplier = max(math.floor(diff / pattern_length), 1)
        length = minimum_length + pattern_length * multiplier
    else:
        length = minimum_length
    LOGGER.debug("legend stroke length %.3f for dash pattern %s", length, pattern)
    return length
