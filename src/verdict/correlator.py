"""Answers "what happened to this feature, scenario or example?".

``Correlator`` is the query side of verdict. It is built over a
``ResultIndex`` and handed the already-parsed Gherkin objects by the
documentation renderer, once per node being rendered.

Usage:
    from verdict import Correlator, Feature, ResultsFormat

    results = Correlator.from_files(ResultsFormat.NUNIT, ["TestResult.xml"])
    results.get_feature_result(Feature(name="Addition"))
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from verdict.config import Settings, get_settings
from verdict.core.aggregation import combine
from verdict.core.exceptions import SignatureBuilderNotConfigured
from verdict.core.models import (
    Feature,
    ResultsFormat,
    Scenario,
    ScenarioOutline,
    TestResult,
)
from verdict.index import ReportIndex, ResultIndex
from verdict.reports import RawResultNode
from verdict.signatures import ExampleSignatureBuilder, signature_builder_for


class Correlator:
    """Query API over indexed test results.

    Every query is a pure read of the index. Names absent from all reports
    yield ``TestResult.NOT_EXECUTED``; they are never an error.

    The installed signature builder is the only mutable state. Set it
    before issuing example queries and do not replace it while queries are
    running on other threads.
    """

    def __init__(
        self,
        index: ResultIndex,
        signature_builder: ExampleSignatureBuilder | None = None,
    ) -> None:
        self._index = index
        self._signature_builder = signature_builder

    @classmethod
    def from_files(
        cls,
        results_format: ResultsFormat | str,
        files: Iterable[Path | str],
        *,
        case_sensitive: bool = True,
        strict: bool = False,
        signature_builder: ExampleSignatureBuilder | None = None,
    ) -> Correlator:
        """Load report files and install the format's signature builder.

        Args:
            results_format: Declared format of every file.
            files: Report paths, in fallback order.
            case_sensitive: Whether names must match case exactly.
            strict: Raise on the first unparseable file instead of skipping it.
            signature_builder: Builder to install instead of the format's default.
        """
        index = ResultIndex.load(
            results_format, files, case_sensitive=case_sensitive, strict=strict
        )
        return cls(index, signature_builder or signature_builder_for(results_format))

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Correlator:
        """Load the report files named by the settings."""
        settings = settings or get_settings()
        return cls.from_files(
            settings.results_format,
            settings.results_files,
            case_sensitive=settings.case_sensitive,
            strict=settings.strict,
        )

    @property
    def index(self) -> ResultIndex:
        """Return the underlying index."""
        return self._index

    @property
    def signature_builder(self) -> ExampleSignatureBuilder | None:
        """Return the installed signature builder, if any."""
        return self._signature_builder

    def set_example_signature_builder(self, builder: ExampleSignatureBuilder | None) -> None:
        """Install (or with None, remove) the builder used by example queries."""
        self._signature_builder = builder

    def get_feature_result(self, feature: Feature) -> TestResult:
        """Return the reported verdict of a feature."""

        def lookup(report: ReportIndex) -> TestResult | None:
            node = report.feature(feature.name)
            return None if node is None else self._verdict(node)

        return self._index.resolve(lookup)

    def get_scenario_result(self, scenario: Scenario) -> TestResult:
        """Return the reported verdict of a scenario."""

        def lookup(report: ReportIndex) -> TestResult | None:
            node = report.case(scenario.feature.name, scenario.name)
            return None if node is None else self._verdict(node)

        return self._index.resolve(lookup)

    def get_scenario_outline_result(self, outline: ScenarioOutline) -> TestResult:
        """Return the verdict of a scenario outline.

        Formats that report the outline as a whole are trusted as is; for
        the others the verdict is rolled up from all reported examples.
        """

        def lookup(report: ReportIndex) -> TestResult | None:
            node = report.case(outline.feature.name, outline.name)
            return None if node is None else self._verdict(node)

        return self._index.resolve(lookup)

    def get_example_result(
        self,
        outline: ScenarioOutline,
        values: Sequence[str],
        signature_builder: ExampleSignatureBuilder | None = None,
    ) -> TestResult:
        """Return the verdict of one example row of a scenario outline.

        Args:
            outline: The outline the row belongs to.
            values: The row's values, in column order.
            signature_builder: Builder to use instead of the installed one.

        Raises:
            SignatureBuilderNotConfigured: If no builder is given or installed.
        """
        builder = signature_builder or self._signature_builder
        if builder is None:
            raise SignatureBuilderNotConfigured()

        flags = 0 if self._index.case_sensitive else re.IGNORECASE
        signature = re.compile(builder.build(values), flags)

        def lookup(report: ReportIndex) -> TestResult | None:
            node = report.case(outline.feature.name, outline.name)
            if node is None:
                return None
            for example in node.children:
                if signature.search(example.name):
                    return self._verdict(example)
            return None

        return self._index.resolve(lookup)

    def get_examples_results(
        self,
        outline: ScenarioOutline,
        signature_builder: ExampleSignatureBuilder | None = None,
    ) -> list[tuple[tuple[str, ...], TestResult]]:
        """Return every example row of an outline with its verdict, in declaration order.

        Args:
            outline: The outline whose rows are queried.
            signature_builder: Builder to use instead of the installed one.

        Raises:
            SignatureBuilderNotConfigured: If no builder is given or installed.
        """
        builder = signature_builder or self._signature_builder
        if builder is None:
            raise SignatureBuilderNotConfigured()
        return [
            (row, self.get_example_result(outline, row, builder))
            for row in outline.example_rows()
        ]

    def _verdict(self, node: RawResultNode) -> TestResult:
        """Reported verdict of a node; synthetic nodes roll up their children."""
        if node.synthetic:
            return combine(self._verdict(child) for child in node.children)
        return TestResult(executed=node.executed, successful=node.successful)
