"""xUnit.net results adapters (v1 and v2 XML).

Both versions list ``<test>`` elements with a ``result`` of Pass, Fail or
Skip under a counting container: ``<class>`` in v1, ``<collection>`` in
v2. The feature title comes from the ``FeatureTitle`` trait that SpecFlow
adds to every generated test. Theory invocations are named
``Display name(param: "value", ...)`` and are grouped per display name.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ..base import ReportAdapter, counts_verdict, group_invocations, parse_count
from ..models import RawResultNode

FEATURE_TITLE_TRAIT = "FeatureTitle"


class _XUnitAdapterBase(ReportAdapter):
    """Shared mapping of xUnit containers and tests."""

    #: Element holding the tests of one test class.
    container_tag: str = ""

    def build(self, root: ET.Element, source: str) -> RawResultNode:
        """Collect every test container of the report as a feature node."""
        features = [self._parse_container(c, source) for c in root.iter(self.container_tag)]
        return RawResultNode(name=source, children=tuple(features))

    def _parse_container(self, container: ET.Element, source: str) -> RawResultNode:
        tests = container.findall("test")
        name = self._feature_title(tests) or container.get("name", "")
        children = group_invocations([self._parse_test(t, source) for t in tests])

        passed = parse_count(container.get("passed"))
        failed = parse_count(container.get("failed"))
        if passed is None or failed is None:
            return self.defaulted(name, "missing or malformed test counts", source, children)

        executed, successful = counts_verdict(passed, failed)
        return self.node(name, executed, successful, children)

    def _parse_test(self, test: ET.Element, source: str) -> RawResultNode:
        name = test.get("name", "")
        result = test.get("result")
        if result is None:
            return self.defaulted(name, "missing result attribute", source)
        return self.node(name, result in ("Pass", "Fail"), result == "Pass")

    @staticmethod
    def _feature_title(tests: list[ET.Element]) -> str:
        for test in tests:
            for trait in test.findall("traits/trait"):
                if trait.get("name") == FEATURE_TITLE_TRAIT and trait.get("value"):
                    return trait.get("value", "")
        return ""


class XUnitAdapter(_XUnitAdapterBase):
    """Adapter for xUnit.net 1.x XML (``<assembly>`` of ``<class>`` elements)."""

    root_tags = ("assemblies", "assembly")
    container_tag = "class"

    @property
    def name(self) -> str:
        """Return the format name."""
        return "xunit"


class XUnit2Adapter(_XUnitAdapterBase):
    """Adapter for xUnit.net 2.x XML (``<assemblies>`` of ``<collection>`` elements)."""

    root_tags = ("assemblies",)
    container_tag = "collection"

    @property
    def name(self) -> str:
        """Return the format name."""
        return "xunit2"
