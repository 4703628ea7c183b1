"""Temperature sparkline rendering."""

import math
from typing import Sequence

from yr_report.config import SPARKLINE_MAX_SAMPLES

SPARK_BLOCKS = "▁▂▃▄▅▆▇█"
FLAT_BLOCK = "▄"


def render_sparkline(temperatures: Sequence[float], max_samples: int = SPARKLINE_MAX_SAMPLES) -> str:
    """Quantize temperatures into block glyphs, keeping time order.

    The scale spans the whole sequence; only the first ``max_samples``
    values are drawn.
    """
    values = list(temperatures)
    if not values:
        return ""

    low, high = min(values), max(values)
    if high <= low:
        return FLAT_BLOCK * min(len(values), max_samples)

    top = len(SPARK_BLOCKS) - 1
    glyphs = []
    for value in values[:max_samples]:
        normalized = (value - low) / (high - low)
        index = min(top, max(0, math.floor(normalized * top)))
        glyphs.append(SPARK_BLOCKS[index])
    return "".join(glyphs)
