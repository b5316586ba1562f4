from __future__ import annotations

from typing import Optional


class ChartError(Exception):
    """Base exception for chart failures."""


class UsageError(ChartError):
    """Raised for an invalid option combination or a malformed root id."""


class RootNotFoundError(ChartError):
    """Raised when the requested root is absent from the ingested graph."""

    def __init__(self, root_id: str, kind: str):
        self.root_id = root_id
        self.kind = kind
        super().__init__(f"No {kind} id = {root_id} found")


class ChartExecutionError(ChartError):
    """Raised when the chart pipeline fails unexpectedly."""

    def __init__(self, message: str, input_path: Optional[str] = None):
        self.input_path = input_path
        super().__init__(message)
