"""Caller-owned chart session for the seasonal bar chart.

The session holds the renderer's chart handle, so the first ``show`` call
creates the chart and later calls only push new data into it.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from homecost.models.estimate import ChartConfig
from homecost.seasonal import build_chart_config

logger = logging.getLogger(__name__)


class ChartRenderer(Protocol):
    """External collaborator that draws bar charts."""

    def create(self, config: ChartConfig) -> Any:
        """Draw a new chart and return a handle to it."""
        ...

    def update(self, handle: Any, values: list[float]) -> None:
        """Replace the data of an existing chart and redraw it."""
        ...


class ChartSession:
    """Owns one chart handle for a single renderer."""

    def __init__(self, renderer: ChartRenderer) -> None:
        self._renderer = renderer
        self._handle: Any = None
        self._created = False
        self._config: ChartConfig | None = None

    @property
    def has_chart(self) -> bool:
        return self._created

    @property
    def config(self) -> ChartConfig | None:
        """The most recently shown chart configuration."""
        return self._config

    def show(self, base_monthly: float) -> ChartConfig:
        """Update the chart with the seasonal series, creating it on first use."""
        config = build_chart_config(base_monthly)
        if not self._created:
            logger.debug("Creating seasonal chart")
            self._handle = self._renderer.create(config)
            self._created = True
        else:
            self._renderer.update(self._handle, list(config.values))
        self._config = config
        return config

    def reset(self) -> None:
        """Forget the current chart so the next ``show`` creates a new one."""
        self._handle = None
        self._created = False
        self._config = None
