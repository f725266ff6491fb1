"""Rollup of several child verdicts into one.

Priority, highest first: failed, inconclusive, passed. With nothing to
combine the verdict is ``NOT_EXECUTED``.
"""

from __future__ import annotations

from collections.abc import Iterable

from verdict.core.models import TestResult


def combine(results: Iterable[TestResult]) -> TestResult:
    """Combine child results under the failed > inconclusive > passed law.

    Args:
        results: Child verdicts in any order.

    Returns:
        ``FAILED`` if any child failed, else ``INCONCLUSIVE`` if any child did
        not run, else ``PASSED`` if there was at least one child, else
        ``NOT_EXECUTED``.
    """
    seen_any = False
    inconclusive = False
    for result in results:
        seen_any = True
        if result == TestResult.FAILED:
            return TestResult.FAILED
        if not result.executed:
            inconclusive = True

    if not seen_any:
        return TestResult.NOT_EXECUTED
    if inconclusive:
        return TestResult.INCONCLUSIVE
    return TestResult.PASSED
