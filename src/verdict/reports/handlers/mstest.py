"""MSTest results (TRX) adapter.

A TRX file keeps outcomes (``<Results>``) apart from test metadata
(``<TestDefinitions>``); the two are joined on the test id. TRX has no
class-level verdict, so features are synthetic groups keyed by the
``FeatureTitle`` test property (falling back to the test class).

Scenario outlines come in two shapes. Data driven tests report an overall
outcome with one inner result per row. SpecFlow instead generates one test
method per example row (``AddingSeveralNumbers_40``,
``AddingSeveralNumbers_Variant1``), all sharing the outline title as their
description and tagged with ``VariantName`` and ``Parameter:<column>``
properties; those methods are gathered into a synthetic outline.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from verdict.logging import get_logger

from ..base import ReportAdapter, local_name
from ..models import RawResultNode

logger = get_logger(__name__)

PASSED_OUTCOMES = frozenset({"Passed", "PassedButRunAborted"})
FAILED_OUTCOMES = frozenset({"Failed", "Error", "Timeout", "Aborted"})

PARAMETER_PREFIX = "Parameter:"
VARIANT_METHOD = re.compile(r"_Variant\d+$")


@dataclass
class _Definition:
    """The parts of a ``<UnitTest>`` definition used for naming."""

    description: str = ""
    feature_title: str = ""
    class_name: str = ""
    method_name: str = ""
    variant: str = ""
    parameters: list[str] = field(default_factory=list)

    @property
    def is_example_row(self) -> bool:
        """Whether the test was generated for one row of an outline."""
        return bool(self.parameters or self.variant or VARIANT_METHOD.search(self.method_name))

    def row_label(self, test_name: str) -> str:
        """Values identifying the row, as shown after the test name."""
        if self.parameters:
            return ",".join(self.parameters)
        if self.variant:
            return self.variant
        # AddingSeveralNumbers_40 -> 40
        return test_name.partition("_")[2]


@dataclass
class _Entry:
    result: ET.Element
    definition: _Definition


def _children(element: ET.Element, tag: str) -> list[ET.Element]:
    """Direct children named ``tag``, whatever their namespace."""
    return [child for child in element if local_name(child.tag) == tag]


def _child(element: ET.Element, tag: str) -> ET.Element | None:
    found = _children(element, tag)
    return found[0] if found else None


class MsTestAdapter(ReportAdapter):
    """Adapter for Visual Studio / MSTest ``.trx`` files."""

    root_tags = ("TestRun",)

    @property
    def name(self) -> str:
        """Return the format name."""
        return "mstest"

    def build(self, root: ET.Element, source: str) -> RawResultNode:
        """Group the run's results into features."""
        definitions = self._read_definitions(root)

        features: dict[str, dict[str, list[_Entry]]] = {}
        results = _child(root, "Results")
        for result in _children(results, "UnitTestResult") if results is not None else []:
            definition = definitions.get(result.get("testId", ""), _Definition())
            feature = definition.feature_title or definition.class_name
            if not feature:
                logger.debug(
                    "result_without_feature", test=result.get("testName"), source=source
                )
                continue
            title = definition.description or result.get("testName", "")
            scenarios = features.setdefault(feature, {})
            scenarios.setdefault(title, []).append(_Entry(result, definition))

        return RawResultNode(
            name=source,
            children=tuple(
                RawResultNode.group(feature, self._scenarios(scenarios, source))
                for feature, scenarios in features.items()
            ),
        )

    def _scenarios(self, scenarios: dict[str, list[_Entry]], source: str) -> list[RawResultNode]:
        """Turn the tests of one feature into scenario and outline nodes."""
        nodes = []
        for title, entries in scenarios.items():
            if len(entries) == 1 and not entries[0].definition.is_example_row:
                nodes.append(self._parse_result(entries[0].result, title, source))
                continue

            rows = []
            for entry in entries:
                test_name = entry.result.get("testName", "")
                label = entry.definition.row_label(test_name)
                name = f"{test_name} ({label})" if label else test_name
                rows.append(self._parse_result(entry.result, name, source))
            nodes.append(RawResultNode.group(title, rows))
        return nodes

    def _read_definitions(self, root: ET.Element) -> dict[str, _Definition]:
        definitions: dict[str, _Definition] = {}
        container = _child(root, "TestDefinitions")
        if container is None:
            return definitions

        for unit_test in _children(container, "UnitTest"):
            definition = _Definition()
            description = _child(unit_test, "Description")
            if description is not None and description.text:
                definition.description = description.text.strip()

            properties = _child(unit_test, "Properties")
            for prop in _children(properties, "Property") if properties is not None else []:
                key = _child(prop, "Key")
                value = _child(prop, "Value")
                if key is None or value is None:
                    continue
                self._apply_property(definition, (key.text or "").strip(), value.text or "")

            method = _child(unit_test, "TestMethod")
            if method is not None:
                # "Namespace.AdditionFeature, Assembly, Version=..." -> "Namespace.AdditionFeature"
                definition.class_name = method.get("className", "").split(",")[0].strip()
                definition.method_name = method.get("name", "")

            definitions[unit_test.get("id", "")] = definition
        return definitions

    @staticmethod
    def _apply_property(definition: _Definition, key: str, value: str) -> None:
        if key == "FeatureTitle":
            definition.feature_title = value.strip()
        elif key == "VariantName":
            definition.variant = value
        elif key.startswith(PARAMETER_PREFIX):
            # properties follow the example table's column order
            definition.parameters.append(value)

    def _parse_result(self, result: ET.Element, name: str, source: str) -> RawResultNode:
        """Parse a result; inner results of a data driven test become its examples."""
        examples = []
        inner = _child(result, "InnerResults")
        if inner is not None:
            examples = [
                self._parse_result(row, row.get("testName", ""), source)
                for row in _children(inner, "UnitTestResult")
            ]

        outcome = result.get("outcome")
        if outcome is None:
            return self.defaulted(name, "missing outcome attribute", source, examples)

        if outcome in PASSED_OUTCOMES:
            return self.node(name, True, True, examples)
        if outcome in FAILED_OUTCOMES:
            return self.node(name, True, False, examples)
        return self.node(name, False, False, examples)
