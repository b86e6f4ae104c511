"""Meteomatics result models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import requests

    from meteomatics_query.schemas import Metric


@dataclass(frozen=True)
class MetricResult:
    """Outcome of one metric request inside a settled fan-out."""

    metric: Metric
    response: requests.Response | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        """True when the request completed without raising."""
        return self.error is None
