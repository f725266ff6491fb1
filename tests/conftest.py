"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import structlog

from verdict.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

FIXTURES_DIR = Path(__file__).parent / "fixtures"

FIXTURE_FILES = {
    "nunit": "results-example-nunit.xml",
    "nunit3": "results-example-nunit3.xml",
    "junit": "results-example-junit.xml",
    "mstest": "results-example-mstest.trx",
    "mstest-variants": "results-example-mstest-variants.trx",
    "xunit": "results-example-xunit.xml",
    "xunit2": "results-example-xunit2.xml",
}


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-fuzz",
        action="store_true",
        default=False,
        help="Run fuzz tests (slower, uses hypothesis)",
    )


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers",
        "fuzz: marks tests as fuzz tests (slower, uses hypothesis)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip fuzz tests unless explicitly enabled."""
    if config.getoption("--run-fuzz"):
        return
    skip_fuzz = pytest.mark.skip(reason="need --run-fuzz option to run")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Give every test fresh settings and default logging.

    ``get_settings`` is cached and ``configure_logging`` mutates global
    structlog state; neither may leak from one test into the next.
    """
    for name in (
        "VERDICT_RESULTS_FORMAT",
        "VERDICT_RESULTS_FILES",
        "VERDICT_CASE_SENSITIVE",
        "VERDICT_STRICT",
        "VERDICT_LOG_LEVEL",
        "VERDICT_LOG_JSON_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Directory holding the sample report files."""
    return FIXTURES_DIR


@pytest.fixture(scope="session")
def fixture_path() -> Callable[[str], Path]:
    """Return the sample report of a results format."""

    def _path(results_format: str) -> Path:
        return FIXTURES_DIR / FIXTURE_FILES[results_format]

    return _path
