"""Name-keyed index over one or more parsed reports.

Reports are kept in the order the caller gave them. Queries walk that
chain and the first report that actually ran the requested item wins.
The index is built once and never changes, so any number of queries may
read it at the same time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from verdict.core.exceptions import ReportParseError
from verdict.core.models import ResultsFormat, TestResult
from verdict.logging import get_logger
from verdict.reports import RawResultNode, adapter_for

logger = get_logger(__name__)


class ReportIndex:
    """Lookup tables of a single report."""

    def __init__(self, tree: RawResultNode, key: Callable[[str], str]) -> None:
        self.tree = tree
        self._key = key
        self._features: dict[str, RawResultNode] = {}
        self._cases: dict[str, dict[str, RawResultNode]] = {}

        for feature in tree.children:
            feature_key = key(feature.name)
            if feature_key in self._features:
                logger.debug("duplicate_feature_ignored", feature=feature.name, source=tree.name)
                continue
            self._features[feature_key] = feature
            self._cases[feature_key] = self._index_cases(feature)

    def _index_cases(self, feature: RawResultNode) -> dict[str, RawResultNode]:
        cases: dict[str, RawResultNode] = {}
        for child in feature.children:
            cases.setdefault(self._key(child.name), child)
        # Members of synthetic groups stay reachable under their full names
        for child in feature.children:
            if child.synthetic:
                for member in child.children:
                    cases.setdefault(self._key(member.name), member)
        return cases

    def feature(self, name: str) -> RawResultNode | None:
        """Return the feature node called ``name``, if reported."""
        return self._features.get(self._key(name))

    def case(self, feature_name: str, name: str) -> RawResultNode | None:
        """Return the scenario or outline node ``name`` of a feature, if reported."""
        cases = self._cases.get(self._key(feature_name))
        if cases is None:
            return None
        return cases.get(self._key(name))


class ResultIndex:
    """Ordered chain of report indexes sharing one matching policy.

    Args:
        trees: Parsed reports, in the order they should be consulted.
        case_sensitive: Whether names must match case exactly.
        failures: Parse errors of reports that could not be loaded.
    """

    def __init__(
        self,
        trees: Iterable[RawResultNode],
        *,
        case_sensitive: bool = True,
        failures: Sequence[ReportParseError] = (),
    ) -> None:
        self.case_sensitive = case_sensitive
        self.failures: tuple[ReportParseError, ...] = tuple(failures)
        self.reports: tuple[ReportIndex, ...] = tuple(
            ReportIndex(tree, self.key) for tree in trees
        )

    @classmethod
    def load(
        cls,
        results_format: ResultsFormat | str,
        files: Iterable[Path | str],
        *,
        case_sensitive: bool = True,
        strict: bool = False,
    ) -> ResultIndex:
        """
        Parse report files and index them.

        A file that cannot be parsed is skipped and recorded in
        ``failures``; the others still load.

        Args:
            results_format: Declared format of every file.
            files: Report paths, in fallback order.
            case_sensitive: Whether names must match case exactly.
            strict: Raise on the first unparseable file instead of skipping it.

        Returns:
            The index over all files that could be parsed.

        Raises:
            ReportParseError: In strict mode, for the first unparseable file.
        """
        adapter = adapter_for(results_format)
        trees: list[RawResultNode] = []
        failures: list[ReportParseError] = []

        for file_path in files:
            try:
                tree = adapter.parse_file(file_path)
            except ReportParseError as e:
                if strict:
                    raise
                logger.warning("results_file_skipped", source=e.source, reason=e.reason)
                failures.append(e)
                continue
            logger.info(
                "results_file_loaded",
                source=str(file_path),
                format=adapter.name,
                features=len(tree.children),
            )
            trees.append(tree)

        return cls(trees, case_sensitive=case_sensitive, failures=failures)

    def key(self, name: str) -> str:
        """Normalize a name for lookup under this index's case policy."""
        return name if self.case_sensitive else name.casefold()

    def resolve(self, lookup: Callable[[ReportIndex], TestResult | None]) -> TestResult:
        """Run ``lookup`` against each report until one reports an executed result.

        Args:
            lookup: Returns the result found in one report, or None if absent.

        Returns:
            The first executed result, otherwise ``NOT_EXECUTED``.
        """
        for report in self.reports:
            result = lookup(report)
            if result is not None and result.executed:
                return result
        return TestResult.NOT_EXECUTED
