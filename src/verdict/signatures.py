"""Example signature builders.

A test runner names each invocation of a parameterized test after its
arguments, e.g. NUnit reports ``AddingSeveralNumbers("40","50","90",null)``.
A signature builder turns the values of one example row into a regular
expression that finds that invocation among the outline's results.
Each format renders arguments differently (quoting, separators, escaping),
so each has its own builder.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from types import MappingProxyType

from verdict.core.models import ResultsFormat

# C#, Java and xUnit all escape these characters the same way
_CONTROL_ESCAPES = MappingProxyType(
    {
        "\\": "\\\\",
        '"': '\\"',
        "\0": "\\0",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
)


def escape_string_literal(value: str) -> str:
    """Escape ``value`` the way C# and Java string literals do."""
    return "".join(_CONTROL_ESCAPES.get(ch, ch) for ch in value)


class ExampleSignatureBuilder(ABC):
    """Turns example values into a pattern matching an invocation name."""

    @abstractmethod
    def build(self, values: Sequence[str]) -> str:
        """Build the signature of one example row.

        Args:
            values: The row's values, in column order.

        Returns:
            Regular expression source to search for in invocation names.
        """


class NUnitExampleSignatureBuilder(ExampleSignatureBuilder):
    """NUnit 2 and 3: ``Method("a","b",null)``.

    Arguments are C# string literals separated by bare commas; SpecFlow
    appends the example tags argument after the row values.
    """

    def build(self, values: Sequence[str]) -> str:
        """Match ``("a","b"`` followed by the next argument or the closing parenthesis."""
        literals = ",".join(f'"{escape_string_literal(v)}"' for v in values)
        return re.escape(f"({literals}") + "[,)]"


class JUnitExampleSignatureBuilder(ExampleSignatureBuilder):
    """JUnit: ``Outline name("a", "b")`` with Java string literals."""

    def build(self, values: Sequence[str]) -> str:
        """Match the complete argument list."""
        literals = ", ".join(f'"{escape_string_literal(v)}"' for v in values)
        return re.escape(f"({literals})") + "$"


class MsTestExampleSignatureBuilder(ExampleSignatureBuilder):
    """MSTest rows: ``Method (a,b)`` with values shown verbatim.

    Rows known only by their SpecFlow ``VariantName`` carry the first value
    alone, ``Method_40 (40)``, so either form is accepted.
    """

    def build(self, values: Sequence[str]) -> str:
        """Match the row suffix of the test name."""
        row = re.escape(",".join(values))
        first = re.escape(values[0]) if values else ""
        return rf" \((?:{row}|{first})\)$"


class XUnitExampleSignatureBuilder(ExampleSignatureBuilder):
    """xUnit theories: ``Display name(a: "1", b: "2", exampleTags: [])``.

    The parameter names are not known from the example row, so any
    identifier is accepted in front of each value. Like xUnit's argument
    formatter, long strings are cut after ``max_string_length`` characters
    and followed by ``...``.
    """

    max_string_length = 50

    def build(self, values: Sequence[str]) -> str:
        """Match each value after its parameter name, in order."""
        arguments = ", ".join(rf"\w+: {re.escape(self._format(v))}" for v in values)
        return rf"\({arguments}(?:, |\))"

    def _format(self, value: str) -> str:
        escaped = escape_string_literal(value)
        if len(escaped) > self.max_string_length:
            return f'"{escaped[: self.max_string_length]}"...'
        return f'"{escaped}"'


# Default builder per format
_BUILDERS: MappingProxyType[ResultsFormat, type[ExampleSignatureBuilder]] = MappingProxyType(
    {
        ResultsFormat.NUNIT: NUnitExampleSignatureBuilder,
        ResultsFormat.NUNIT3: NUnitExampleSignatureBuilder,
        ResultsFormat.JUNIT: JUnitExampleSignatureBuilder,
        ResultsFormat.MSTEST: MsTestExampleSignatureBuilder,
        ResultsFormat.XUNIT: XUnitExampleSignatureBuilder,
        ResultsFormat.XUNIT2: XUnitExampleSignatureBuilder,
    }
)


def signature_builder_for(results_format: ResultsFormat | str) -> ExampleSignatureBuilder:
    """Create the default signature builder of a results format."""
    return _BUILDERS[ResultsFormat(results_format)]()
