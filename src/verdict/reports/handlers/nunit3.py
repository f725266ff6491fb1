"""NUnit 3 results adapter.

NUnit 3 writes a ``<test-run>`` document. Suites and cases nest directly
(there is no ``<results>`` wrapper) and titles set with ``[Description]``
appear as a ``Description`` property.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ..base import ReportAdapter
from ..models import RawResultNode

FIXTURE = "TestFixture"
PARAMETERIZED = "ParameterizedMethod"

# A result outside these values (Skipped, Inconclusive) means not run
EXECUTED_RESULTS = frozenset({"Passed", "Failed", "Warning"})


class NUnit3Adapter(ReportAdapter):
    """Adapter for NUnit 3 ``TestResult.xml`` files."""

    root_tags = ("test-run",)

    @property
    def name(self) -> str:
        """Return the format name."""
        return "nunit3"

    def build(self, root: ET.Element, source: str) -> RawResultNode:
        """Collect every fixture of the run as a feature node."""
        features = [
            self._parse_fixture(suite, source)
            for suite in root.iter("test-suite")
            if suite.get("type") == FIXTURE
        ]
        return RawResultNode(name=source, children=tuple(features))

    def _parse_fixture(self, fixture: ET.Element, source: str) -> RawResultNode:
        children = []
        for element in fixture:
            if element.tag == "test-case":
                children.append(self._with_flags(element, self._title(element), source))
            elif element.tag == "test-suite" and element.get("type") == PARAMETERIZED:
                examples = [
                    self._with_flags(case, case.get("name", ""), source)
                    for case in element.iter("test-case")
                ]
                children.append(self._with_flags(element, self._title(element), source, examples))
        return self._with_flags(fixture, self._title(fixture), source, children)

    def _with_flags(
        self,
        element: ET.Element,
        name: str,
        source: str,
        children: list[RawResultNode] | None = None,
    ) -> RawResultNode:
        result = element.get("result")
        if result is None:
            return self.defaulted(name, "missing result attribute", source, children)
        return self.node(name, result in EXECUTED_RESULTS, result == "Passed", children)

    @staticmethod
    def _title(element: ET.Element) -> str:
        """Prefer the ``Description`` property over the generated member name."""
        for prop in element.findall("properties/property"):
            if prop.get("name") == "Description" and prop.get("value"):
                return prop.get("value", "")
        return element.get("name", "")
