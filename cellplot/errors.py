from __future__ import annotations


class PlotError(ValueError):
    """Base class for errors raised by cellplot."""


class PlotDataError(PlotError):
    """Caller data could not be coerced into numeric series."""


class PlotConfigError(PlotError):
    """Plot configuration is inconsistent with the chart kind or the data."""
