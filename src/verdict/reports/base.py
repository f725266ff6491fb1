"""Abstract base class for report adapters."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path

from verdict.core.exceptions import ReportParseError
from verdict.logging import get_logger

from .models import RawResultNode

logger = get_logger(__name__)


def local_name(tag: str) -> str:
    """Strip an XML namespace: ``{http://ns}UnitTest`` -> ``UnitTest``."""
    return tag.rsplit("}", 1)[-1]


def parse_count(value: str | None) -> int | None:
    """Parse a non-negative integer attribute, or None when absent or malformed."""
    if value is None:
        return None
    try:
        count = int(value)
    except ValueError:
        return None
    return count if count >= 0 else None


def counts_verdict(passed: int | None, failed: int | None) -> tuple[bool, bool]:
    """Derive suite flags from pass/fail counts.

    A suite ran when at least one of its tests ran and succeeded when tests
    passed and none failed. Unknown counts mean the suite did not run.
    """
    if passed is None or failed is None:
        return False, False
    executed = passed + failed > 0
    return executed, executed and failed == 0 and passed > 0


def invocation_base(name: str) -> str | None:
    """Return the test name of a parameterized invocation ``name(args)``.

    Returns None when ``name`` does not look like an invocation.
    """
    if not name.endswith(")") or "(" not in name:
        return None
    base = name[: name.index("(")].rstrip()
    return base or None


def group_invocations(cases: list[RawResultNode]) -> list[RawResultNode]:
    """Gather invocations of the same parameterized test under one node.

    Flat formats list each invocation ``Outline(args)`` next to plain
    scenarios. Invocations sharing a base name are moved under a synthetic
    node named after the base, placed where the first invocation appeared.
    """
    grouped: dict[str, list[RawResultNode]] = {}
    order: list[str | RawResultNode] = []
    for case in cases:
        base = invocation_base(case.name)
        if base is None:
            order.append(case)
            continue
        if base not in grouped:
            grouped[base] = []
            order.append(base)
        grouped[base].append(case)

    result = []
    for entry in order:
        if isinstance(entry, str):
            result.append(RawResultNode.group(entry, grouped[entry]))
        else:
            result.append(entry)
    return result


class ReportAdapter(ABC):
    """Abstract base class for test report adapters.

    Each results format has a concrete implementation that maps its XML
    layout onto a ``RawResultNode`` tree.
    """

    #: Root element names (namespace stripped) accepted by this adapter.
    root_tags: tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the results format this adapter supports."""

    @abstractmethod
    def build(self, root: ET.Element, source: str) -> RawResultNode:
        """Convert a parsed document into a result tree.

        Args:
            root: Root element, already checked against ``root_tags``.
            source: Human-readable origin of the document, used as root name.

        Returns:
            Root ``RawResultNode`` whose children are the feature nodes.
        """

    def parse_string(self, content: str | bytes, source: str = "<string>") -> RawResultNode:
        """Parse a report from its text.

        Args:
            content: XML document as text or bytes.
            source: Origin of the document for error messages.

        Returns:
            Root ``RawResultNode`` of the report.

        Raises:
            ReportParseError: If the document is not well-formed or its root
                element does not belong to this format.
        """
        try:
            root = ET.fromstring(content)  # noqa: S314 - trusted test report data
        except ET.ParseError as e:
            raise ReportParseError(source, f"malformed XML ({e})") from e

        tag = local_name(root.tag)
        if tag not in self.root_tags:
            expected = " or ".join(f"<{t}>" for t in self.root_tags)
            raise ReportParseError(
                source, f"root element <{tag}> is not a {self.name} report (expected {expected})"
            )

        tree = self.build(root, source)
        logger.debug("report_parsed", source=source, format=self.name, features=len(tree.children))
        return tree

    def parse_file(self, file_path: Path | str) -> RawResultNode:
        """Parse a report from a file.

        Raises:
            ReportParseError: If the file cannot be read or parsed.
        """
        path = Path(file_path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ReportParseError(str(path), f"cannot read file ({e.strerror or e})") from e
        return self.parse_string(content, source=str(path))

    @staticmethod
    def node(
        name: str,
        executed: bool,
        successful: bool,
        children: list[RawResultNode] | None = None,
    ) -> RawResultNode:
        """Create a node whose success always implies execution."""
        return RawResultNode(
            name=name,
            executed=executed,
            successful=executed and successful,
            children=tuple(children or ()),
        )

    @staticmethod
    def defaulted(
        name: str,
        reason: str,
        source: str,
        children: list[RawResultNode] | None = None,
    ) -> RawResultNode:
        """Create a not-run node for an entry with missing or malformed attributes."""
        logger.debug("node_defaulted", node=name, reason=reason, source=source)
        return RawResultNode(name=name, children=tuple(children or ()))
