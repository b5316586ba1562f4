"""
gedcom_chart: text descendant charts from GEDCOM files.

    from gedcom_chart import ChartRequest, run_chart

    result = run_chart(ChartRequest("family.ged", root_id="I12"))
    print("\n".join(result.lines))
"""

from gedcom_chart.core.context import ChartRequest, ChartResult
from gedcom_chart.core.pipeline import ChartPipeline, load_graph, run_chart

__all__ = [
    "ChartPipeline",
    "ChartRequest",
    "ChartResult",
    "load_graph",
    "run_chart",
]
