"""Verdict model and the Gherkin objects results are matched against.

The Gherkin objects (``Feature``, ``Scenario``, ``ScenarioOutline``)
arrive already parsed from feature files; only their names and ownership
matter here. ``TestResult`` is the verdict handed back for each of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class ResultsFormat(Enum):
    """Supported test results formats.

    The caller always declares the format; reports are never sniffed.
    """

    NUNIT = "nunit"
    NUNIT3 = "nunit3"
    JUNIT = "junit"
    MSTEST = "mstest"
    XUNIT = "xunit"
    XUNIT2 = "xunit2"


@dataclass(frozen=True)
class TestResult:
    """Outcome of a feature, scenario or example.

    Two results are equal when both facets are equal. ``INCONCLUSIVE`` and
    ``NOT_EXECUTED`` therefore compare equal even though one comes from the
    report and the other from its absence.
    """

    __test__: ClassVar[bool] = False

    executed: bool
    successful: bool

    PASSED: ClassVar[TestResult]
    FAILED: ClassVar[TestResult]
    INCONCLUSIVE: ClassVar[TestResult]
    NOT_EXECUTED: ClassVar[TestResult]

    @property
    def status(self) -> str:
        """Return the marker a renderer should show: passed, failed or inconclusive."""
        if not self.executed:
            return "inconclusive"
        return "passed" if self.successful else "failed"

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary."""
        return {
            "status": self.status,
            "executed": self.executed,
            "successful": self.successful,
        }


TestResult.PASSED = TestResult(executed=True, successful=True)
TestResult.FAILED = TestResult(executed=True, successful=False)
TestResult.INCONCLUSIVE = TestResult(executed=False, successful=False)
TestResult.NOT_EXECUTED = TestResult(executed=False, successful=False)


@dataclass
class Feature:
    """A feature parsed from a feature file."""

    name: str


@dataclass
class Scenario:
    """A scenario belonging to a feature."""

    name: str
    feature: Feature


@dataclass
class Examples:
    """One examples table of a scenario outline."""

    rows: list[tuple[str, ...]] = field(default_factory=list)
    name: str = ""


@dataclass
class ScenarioOutline:
    """A parameterized scenario instantiated by its examples rows."""

    name: str
    feature: Feature
    examples: list[Examples] = field(default_factory=list)

    def example_rows(self) -> list[tuple[str, ...]]:
        """Return every example row across all examples tables, in order."""
        return [row for table in self.examples for row in table.rows]
