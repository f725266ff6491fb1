"""Framework-specific test report handling.

This module reduces reports from different test runners (NUnit, JUnit,
MSTest, xUnit) to one tree shape so the rest of verdict never looks at
XML.

Usage:
    from verdict.reports import adapter_for

    adapter = adapter_for("nunit")
    tree = adapter.parse_file("TestResult.xml")
"""

from .base import ReportAdapter
from .models import RawResultNode
from .registry import ADAPTERS, adapter_for

__all__ = [
    "ADAPTERS",
    "RawResultNode",
    "ReportAdapter",
    "adapter_for",
]
