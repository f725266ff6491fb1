"""NUnit 2.x results adapter.

NUnit 2 writes a ``<test-results>`` document of nested ``<test-suite>``
elements (assembly, namespaces, fixtures) whose ``<results>`` hold
``<test-case>`` elements. Parameterized tests get their own
``ParameterizedTest`` suite carrying the framework's verdict for the whole
outline, with one test case per invocation.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ..base import ReportAdapter
from ..models import RawResultNode

FIXTURE = "TestFixture"
PARAMETERIZED = "ParameterizedTest"

# Results that mean the test did not run even when executed="True"
NOT_RUN_RESULTS = frozenset({"Ignored", "Inconclusive", "NotRunnable", "Skipped", "Cancelled"})

_BOOLEANS = {"true": True, "false": False}


class NUnitAdapter(ReportAdapter):
    """Adapter for NUnit 2.x ``TestResult.xml`` files."""

    root_tags = ("test-results",)

    @property
    def name(self) -> str:
        """Return the format name."""
        return "nunit"

    def build(self, root: ET.Element, source: str) -> RawResultNode:
        """Collect every fixture of the report as a feature node."""
        features = [
            self._parse_suite(suite, source)
            for suite in root.iter("test-suite")
            if suite.get("type") == FIXTURE
        ]
        return RawResultNode(name=source, children=tuple(features))

    def _parse_suite(self, suite: ET.Element, source: str) -> RawResultNode:
        """Parse a fixture or a parameterized test with its direct children."""
        children = []
        results = suite.find("results")
        if results is not None:
            for element in results:
                if element.tag == "test-case":
                    children.append(self._parse_case(element, source, self._title(element)))
                elif element.tag == "test-suite" and element.get("type") == PARAMETERIZED:
                    children.append(self._parse_parameterized(element, source))
        return self._with_flags(suite, self._title(suite), source, children)

    def _parse_parameterized(self, suite: ET.Element, source: str) -> RawResultNode:
        """Parse an outline suite; its invocations keep their full names."""
        examples = []
        results = suite.find("results")
        if results is not None:
            examples = [
                self._parse_case(case, source, case.get("name", ""))
                for case in results.iter("test-case")
            ]
        return self._with_flags(suite, self._title(suite), source, examples)

    def _parse_case(self, case: ET.Element, source: str, name: str) -> RawResultNode:
        return self._with_flags(case, name, source, None)

    def _with_flags(
        self,
        element: ET.Element,
        name: str,
        source: str,
        children: list[RawResultNode] | None,
    ) -> RawResultNode:
        executed = _BOOLEANS.get((element.get("executed") or "").lower())
        if executed is None:
            return self.defaulted(name, "missing or malformed executed attribute", source, children)
        if not executed:
            return self.node(name, False, False, children)

        successful = _BOOLEANS.get((element.get("success") or "").lower())
        if successful is None:
            return self.defaulted(name, "missing or malformed success attribute", source, children)
        if element.get("result") in NOT_RUN_RESULTS:
            return self.node(name, False, False, children)
        return self.node(name, True, successful, children)

    @staticmethod
    def _title(element: ET.Element) -> str:
        """SpecFlow stores the feature or scenario title in ``description``."""
        return element.get("description") or element.get("name", "")
