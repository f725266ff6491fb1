"""Fuzz tests for report parsing and the CLI using Hypothesis.

These tests use property-based testing to find crashes in the adapters
and unexpected behavior in CLI argument handling.

Run with: pytest tests/e2e/test_parsing_fuzz.py -v --run-fuzz
"""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st
from typer.testing import CliRunner

from verdict.cli.app import app
from verdict.core.exceptions import ReportParseError
from verdict.core.models import ResultsFormat
from verdict.reports import adapter_for

# Skip all tests in this module unless --run-fuzz is provided
pytestmark = pytest.mark.fuzz

runner = CliRunner()


# =============================================================================
# Hypothesis Strategies
# =============================================================================


def results_formats() -> st.SearchStrategy[ResultsFormat]:
    """Strategy for supported results formats."""
    return st.sampled_from(list(ResultsFormat))


def names() -> st.SearchStrategy[str]:
    """Strategy for feature and scenario names that XML can carry."""
    return st.text(
        alphabet=st.characters(blacklist_categories=("Cs", "Cc", "Cn")),
        min_size=1,
        max_size=40,
    ).filter(lambda s: not s.startswith("-"))


def counts() -> st.SearchStrategy[str]:
    """Strategy for count attributes, well-formed or not."""
    return st.one_of(st.integers(min_value=-5, max_value=50).map(str), st.text(max_size=5))


# =============================================================================
# Adapter fuzzing
# =============================================================================


class TestAdapterFuzz:
    """Adapters either return a tree or raise ReportParseError."""

    @given(results_formats(), st.text(max_size=200))
    def test_arbitrary_text(self, results_format: ResultsFormat, content: str):
        """Random text never escapes as anything but a parse error."""
        try:
            adapter_for(results_format).parse_string(content)
        except ReportParseError:
            pass

    @given(names(), counts(), counts(), counts())
    def test_junit_counts(self, name: str, tests: str, failures: str, skipped: str):
        """Any count values give a node whose success implies execution."""
        xml = (
            f"<testsuites><testsuite name={quoteattr(name)} tests={quoteattr(tests)} "
            f"failures={quoteattr(failures)} skipped={quoteattr(skipped)}>"
            f"<testcase name={quoteattr(name)}/></testsuite></testsuites>"
        )

        tree = adapter_for(ResultsFormat.JUNIT).parse_string(xml)

        for node in tree.walk():
            assert node.executed or not node.successful


# =============================================================================
# CLI fuzzing
# =============================================================================


class TestCliFuzz:
    """The query command never crashes on odd names."""

    @given(feature=names(), scenario=names())
    @settings(max_examples=30, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_query_names(self, fixture_path, feature: str, scenario: str):
        """Arbitrary names resolve to a status."""
        result = runner.invoke(
            app,
            [
                "query",
                "--feature",
                feature,
                "--scenario",
                scenario,
                "-r",
                str(fixture_path("nunit")),
            ],
        )

        assert result.exit_code == 0
        assert result.stdout.strip() in {"passed", "failed", "inconclusive"}
