"""Mapping of results formats to their adapters."""

from __future__ import annotations

from types import MappingProxyType

from verdict.core.models import ResultsFormat

from .base import ReportAdapter
from .handlers import (
    JUnitAdapter,
    MsTestAdapter,
    NUnit3Adapter,
    NUnitAdapter,
    XUnit2Adapter,
    XUnitAdapter,
)

# Adapter per format - single source of truth
ADAPTERS: MappingProxyType[ResultsFormat, type[ReportAdapter]] = MappingProxyType(
    {
        ResultsFormat.NUNIT: NUnitAdapter,
        ResultsFormat.NUNIT3: NUnit3Adapter,
        ResultsFormat.JUNIT: JUnitAdapter,
        ResultsFormat.MSTEST: MsTestAdapter,
        ResultsFormat.XUNIT: XUnitAdapter,
        ResultsFormat.XUNIT2: XUnit2Adapter,
    }
)


def adapter_for(results_format: ResultsFormat | str) -> ReportAdapter:
    """
    Create the adapter for a results format.

    Args:
        results_format: Format member or its value (e.g. ``"nunit3"``).

    Returns:
        A new adapter instance.

    Raises:
        ValueError: If the format is not supported.
    """
    return ADAPTERS[ResultsFormat(results_format)]()
