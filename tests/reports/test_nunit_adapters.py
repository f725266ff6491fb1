"""Tests for the NUnit 2 and NUnit 3 report adapters."""

from __future__ import annotations

import pytest

from verdict.reports import RawResultNode
from verdict.reports.handlers import NUnit3Adapter, NUnitAdapter


def child(node: RawResultNode, name: str) -> RawResultNode:
    return next(c for c in node.children if c.name == name)


def flags(node: RawResultNode) -> tuple[bool, bool]:
    return node.executed, node.successful


class TestNUnitAdapter:
    """Tests for NUnitAdapter against a SpecFlow generated report."""

    def test_fixtures_become_features_named_by_description(self, fixture_path):
        """Every TestFixture suite is a feature titled by its description."""
        tree = NUnitAdapter().parse_file(fixture_path("nunit"))

        assert [f.name for f in tree.children] == [
            "Addition",
            "Failing",
            "Inconclusive",
            "Passing",
            "Scenario Outlines",
        ]

    def test_feature_flags(self, fixture_path):
        """Feature flags come from the fixture's executed/result/success attributes."""
        tree = NUnitAdapter().parse_file(fixture_path("nunit"))

        assert flags(child(tree, "Addition")) == (True, False)
        assert flags(child(tree, "Passing")) == (True, True)
        assert flags(child(tree, "Inconclusive")) == (False, False)

    def test_scenarios(self, fixture_path):
        """Test cases are scenarios titled by their description."""
        addition = child(NUnitAdapter().parse_file(fixture_path("nunit")), "Addition")

        assert flags(child(addition, "Add two numbers")) == (True, True)
        assert flags(child(addition, "Fail to add two numbers")) == (True, False)
        assert flags(child(addition, "Ignored adding two numbers")) == (False, False)
        assert flags(child(addition, "Not automated adding two numbers")) == (False, False)

    def test_parameterized_suite_is_outline_with_examples(self, fixture_path):
        """A ParameterizedTest suite is an outline whose examples keep full names."""
        addition = child(NUnitAdapter().parse_file(fixture_path("nunit")), "Addition")
        outline = child(addition, "Adding several numbers")

        assert not outline.synthetic
        assert flags(outline) == (True, True)
        assert len(outline.children) == 2
        assert outline.children[0].name.endswith('AddingSeveralNumbers("40","50","90",null)')

    def test_missing_executed_attribute_defaults_to_not_run(self):
        """A test case without ``executed`` is treated as not run."""
        xml = """<test-results>
          <test-suite type="TestFixture" name="F" executed="True" result="Success" success="True">
            <results>
              <test-case name="T" result="Success" success="True" />
            </results>
          </test-suite>
        </test-results>"""

        feature = NUnitAdapter().parse_string(xml).children[0]

        assert flags(feature.children[0]) == (False, False)

    @pytest.mark.parametrize("success", [None, "", "yes", "1"])
    def test_missing_or_malformed_success_defaults_to_not_run(self, success: str | None):
        """An executed test case without a readable ``success`` is treated as not run."""
        success_attr = "" if success is None else f' success="{success}"'
        xml = f"""<test-results>
          <test-suite type="TestFixture" name="F" executed="True" result="Success" success="True">
            <results>
              <test-case name="S" executed="True"{success_attr} />
            </results>
          </test-suite>
        </test-results>"""

        feature = NUnitAdapter().parse_string(xml).children[0]

        assert flags(feature.children[0]) == (False, False)

    def test_boolean_attributes_ignore_case(self):
        """``executed`` and ``success`` are read case-insensitively."""
        xml = """<test-results>
          <test-suite type="TestFixture" name="F" executed="TRUE" result="Success" success="true">
            <results />
          </test-suite>
        </test-results>"""

        assert flags(NUnitAdapter().parse_string(xml).children[0]) == (True, True)

    def test_success_without_execution_is_not_success(self):
        """A test that did not run never counts as successful."""
        xml = """<test-results>
          <test-suite type="TestFixture" name="F" executed="False" success="True">
            <results />
          </test-suite>
        </test-results>"""

        assert flags(NUnitAdapter().parse_string(xml).children[0]) == (False, False)


class TestNUnit3Adapter:
    """Tests for NUnit3Adapter."""

    def test_feature_named_by_description_property(self, fixture_path):
        """The Description property titles the fixture."""
        tree = NUnit3Adapter().parse_file(fixture_path("nunit3"))

        assert [f.name for f in tree.children] == ["Addition"]
        assert flags(tree.children[0]) == (True, False)

    def test_results(self, fixture_path):
        """Passed and Failed ran; Skipped and Inconclusive did not."""
        addition = NUnit3Adapter().parse_file(fixture_path("nunit3")).children[0]

        assert flags(child(addition, "Add two numbers")) == (True, True)
        assert flags(child(addition, "Fail to add two numbers")) == (True, False)
        assert flags(child(addition, "Ignored adding two numbers")) == (False, False)
        assert flags(child(addition, "Not automated adding two numbers")) == (False, False)

    def test_missing_result_defaults_to_not_run(self, fixture_path):
        """A test case without a result is treated as not run."""
        addition = NUnit3Adapter().parse_file(fixture_path("nunit3")).children[0]

        assert flags(child(addition, "Adding two numbers without a result")) == (False, False)

    def test_parameterized_method_is_outline(self, fixture_path):
        """A ParameterizedMethod suite is an outline with one example per case."""
        addition = NUnit3Adapter().parse_file(fixture_path("nunit3")).children[0]
        outline = child(addition, "Adding several numbers")

        assert flags(outline) == (True, False)
        assert [flags(e) for e in outline.children] == [
            (True, True),
            (True, True),
            (True, False),
        ]

    def test_name_attribute_without_description(self):
        """Without a Description property the member name is used."""
        xml = """<test-run>
          <test-suite type="TestFixture" name="PassingFeature" result="Passed">
            <test-case name="PassingScenario" result="Passed" />
          </test-suite>
        </test-run>"""

        feature = NUnit3Adapter().parse_string(xml).children[0]

        assert feature.name == "PassingFeature"
        assert feature.children[0].name == "PassingScenario"

    def test_warning_counts_as_executed_but_not_passed(self):
        """A Warning result ran but did not pass."""
        xml = """<test-run>
          <test-suite type="TestFixture" name="F" result="Warning" />
        </test-run>"""

        assert flags(NUnit3Adapter().parse_string(xml).children[0]) == (True, False)
