from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gedcom_chart.graph.entities import FamilyGraph
from gedcom_chart.graph.selector import SelectionMode


@dataclass
class ChartRequest:
    """
    Everything one chart run needs.
    Unset display options fall back to the ``chart`` section of the config.
    """

    input_path: str
    root_id: Optional[str] = None
    mode: SelectionMode = SelectionMode.ANCESTORS

    use_initials: Optional[bool] = None
    family_separator: Optional[bool] = None


@dataclass
class ChartResult:
    graph: FamilyGraph
    lines: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)
