from __future__ import annotations

from .renderer import ChartState, DescendantChartRenderer, render_chart

__all__ = [
    "ChartState",
    "DescendantChartRenderer",
    "render_chart",
]
