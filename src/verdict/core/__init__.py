"""Core verdict model, aggregation and exceptions."""

from verdict.core.aggregation import combine
from verdict.core.exceptions import (
    ConfigurationError,
    ReportParseError,
    SignatureBuilderNotConfigured,
    VerdictError,
)
from verdict.core.models import (
    Examples,
    Feature,
    ResultsFormat,
    Scenario,
    ScenarioOutline,
    TestResult,
)

__all__ = [
    "combine",
    "ConfigurationError",
    "ReportParseError",
    "SignatureBuilderNotConfigured",
    "VerdictError",
    "Examples",
    "Feature",
    "ResultsFormat",
    "Scenario",
    "ScenarioOutline",
    "TestResult",
]
