"""verdict - correlate BDD specifications with test runner results."""

__version__ = "1.0.0"

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
from verdict.correlator import Correlator
from verdict.index import ResultIndex
from verdict.signatures import (
    ExampleSignatureBuilder,
    JUnitExampleSignatureBuilder,
    MsTestExampleSignatureBuilder,
    NUnitExampleSignatureBuilder,
    XUnitExampleSignatureBuilder,
    signature_builder_for,
)

__all__ = [
    "Correlator",
    "ResultIndex",
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
    "ExampleSignatureBuilder",
    "JUnitExampleSignatureBuilder",
    "MsTestExampleSignatureBuilder",
    "NUnitExampleSignatureBuilder",
    "XUnitExampleSignatureBuilder",
    "signature_builder_for",
]
