"""JUnit XML results adapter.

This adapter understands the JUnit XML layout written by:
- JUnit / Maven Surefire
- cucumber-jvm and Cucumber's JUnit formatter
- pytest (``--junitxml``)
- Many other test frameworks

Outermost ``<testsuite>`` elements become features. A ``<testsuite>``
nested inside a feature is an outline carrying its own counts; otherwise
parameterized invocations written as ``Outline name("a", "b")`` are grouped
under a synthetic outline node.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ..base import ReportAdapter, counts_verdict, group_invocations, parse_count
from ..models import RawResultNode


class JUnitAdapter(ReportAdapter):
    """Adapter for JUnit XML reports."""

    root_tags = ("testsuites", "testsuite")

    @property
    def name(self) -> str:
        """Return the format name."""
        return "junit"

    def build(self, root: ET.Element, source: str) -> RawResultNode:
        """Collect the outermost test suites as feature nodes."""
        return RawResultNode(
            name=source,
            children=tuple(self._parse_feature(s, source) for s in self._outer_suites(root)),
        )

    def _outer_suites(self, element: ET.Element) -> list[ET.Element]:
        # Handle both <testsuites> and <testsuite> as root, and nested <testsuites>
        if element.tag == "testsuite":
            return [element]
        suites = []
        for child in element:
            if child.tag in ("testsuite", "testsuites"):
                suites.extend(self._outer_suites(child))
        return suites

    def _parse_feature(self, suite: ET.Element, source: str) -> RawResultNode:
        cases = []
        outlines = []
        for element in suite:
            if element.tag == "testcase":
                cases.append(self._parse_testcase(element))
            elif element.tag == "testsuite":
                examples = [self._parse_testcase(tc) for tc in element.iter("testcase")]
                outlines.append(self._with_counts(element, source, examples))
        return self._with_counts(suite, source, group_invocations(cases) + outlines)

    def _with_counts(
        self,
        suite: ET.Element,
        source: str,
        children: list[RawResultNode],
    ) -> RawResultNode:
        """Derive a suite's flags from its ``tests``/``failures``/``errors``/``skipped`` counts."""
        name = suite.get("name", "")
        tests = parse_count(suite.get("tests"))
        failures = parse_count(suite.get("failures", "0"))
        errors = parse_count(suite.get("errors", "0"))
        skipped = parse_count(suite.get("skipped", "0"))

        if tests is None or failures is None or errors is None or skipped is None:
            return self.defaulted(name, "missing or malformed test counts", source, children)

        failed = failures + errors
        passed = max(tests - failed - skipped, 0)
        executed, successful = counts_verdict(passed, failed)
        return self.node(name, executed, successful, children)

    def _parse_testcase(self, testcase: ET.Element) -> RawResultNode:
        """Parse a testcase element.

        A JUnit test case passed when it carries no ``<skipped>``,
        ``<failure>`` or ``<error>`` child.
        """
        name = testcase.get("name", "")

        if testcase.find("skipped") is not None:
            return self.node(name, False, False)

        if testcase.find("failure") is not None or testcase.find("error") is not None:
            return self.node(name, True, False)

        return self.node(name, True, True)
