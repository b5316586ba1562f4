from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from gedcom_chart.chart.renderer import render_chart
from gedcom_chart.config import get_config
from gedcom_chart.core.context import ChartRequest, ChartResult
from gedcom_chart.core.exceptions import ChartError, ChartExecutionError
from gedcom_chart.graph.entities import FamilyGraph
from gedcom_chart.graph.ingestor import ingest
from gedcom_chart.graph.selector import normalize_root_id, select
from gedcom_chart.loader import load_tree, record_events
from gedcom_chart.logging import get_logger
from gedcom_chart.normalization.name_formatter import NameFormatter

log = get_logger(__name__)


def load_graph(path: Union[str, Path], root_requested: bool = False) -> FamilyGraph:
    """GEDCOM file -> FamilyGraph (every entity visible unless a root is requested)."""
    log.info(f"Loading GEDCOM: {path}")
    tree = load_tree(path)
    return ingest(record_events(tree.records), root_requested=root_requested)


def graph_stats(graph: FamilyGraph) -> dict:
    return {
        "people": len(graph.persons),
        "families": len(graph.families),
        "visible_people": len(graph.visible_persons()),
        "visible_families": len(graph.visible_families()),
    }


class ChartPipeline:
    """
    load -> ingest -> select -> render.
    No chart logic lives here.
    """

    def __init__(self, request: ChartRequest, config=None):
        self.request = request
        self.cfg = config if config is not None else get_config()

    def _formatter(self) -> NameFormatter:
        use_initials = self.request.use_initials
        if use_initials is None:
            use_initials = self.cfg.initials
        return NameFormatter(use_initials=use_initials, honorifics=self.cfg.honorifics)

    def _family_separator(self) -> bool:
        if self.request.family_separator is None:
            return self.cfg.family_separator
        return self.request.family_separator

    def build_graph(self, root_id: Optional[str]) -> FamilyGraph:
        graph = load_graph(self.request.input_path, root_requested=root_id is not None)
        select(graph, root_id, self.request.mode)
        return graph

    def run(self, render: bool = True) -> ChartResult:
        req = self.request
        root_id = normalize_root_id(req.root_id)
        log.info("Pipeline starting")

        try:
            graph = self.build_graph(root_id)
            result = ChartResult(graph=graph, stats=graph_stats(graph))

            if render:
                result.lines = render_chart(
                    graph,
                    root_id,
                    formatter=self._formatter(),
                    family_separator=self._family_separator(),
                )
                result.stats["lines"] = len(result.lines)

        except ChartError:
            raise
        except Exception as exc:
            log.exception("Pipeline execution failed")
            raise ChartExecutionError(str(exc), input_path=str(req.input_path)) from exc

        log.info("Pipeline completed successfully")
        return result


def run_chart(request: ChartRequest, config: Optional[object] = None) -> ChartResult:
    return ChartPipeline(request, config=config).run()
