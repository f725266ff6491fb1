"""Main Typer CLI application for verdict."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from verdict.config import get_settings
from verdict.core.exceptions import ReportParseError
from verdict.core.models import Feature, ResultsFormat, Scenario, ScenarioOutline, TestResult
from verdict.correlator import Correlator
from verdict.logging import configure_logging

app = typer.Typer(
    name="verdict",
    help="Correlate BDD specifications with test runner results",
    no_args_is_help=True,
)

EXIT_PARSE_ERROR = 1
EXIT_USAGE_ERROR = 2


@app.callback()
def main_callback() -> None:
    """Correlate BDD specifications with test runner results."""


def fail(message: str, code: int) -> typer.Exit:
    """Print an error to stderr and return the exit to raise."""
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=code)


@app.command()
def query(
    feature: Annotated[
        str,
        typer.Option("--feature", help="Feature name"),
    ],
    results: Annotated[
        list[Path] | None,
        typer.Option(
            "-r",
            "--results",
            help="Results file; repeat for a fallback chain (default: VERDICT_RESULTS_FILES)",
        ),
    ] = None,
    results_format: Annotated[
        ResultsFormat | None,
        typer.Option(
            "-f",
            "--format",
            help="Results format (default: VERDICT_RESULTS_FORMAT)",
        ),
    ] = None,
    scenario: Annotated[
        str | None,
        typer.Option("--scenario", help="Scenario name"),
    ] = None,
    outline: Annotated[
        str | None,
        typer.Option("--outline", help="Scenario outline name"),
    ] = None,
    example: Annotated[
        list[str] | None,
        typer.Option("-e", "--example", help="Example value of the outline; repeat per column"),
    ] = None,
    ignore_case: Annotated[
        bool,
        typer.Option("--ignore-case", help="Match names case-insensitively"),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail when any results file cannot be parsed"),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the verdict as JSON"),
    ] = False,
) -> None:
    """Print the verdict of a feature, scenario, outline or example."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json_format)

    files = results or settings.results_files
    if not files:
        raise fail("no results files given", EXIT_USAGE_ERROR)
    if scenario and outline:
        raise fail("--scenario and --outline are mutually exclusive", EXIT_USAGE_ERROR)
    if example and not outline:
        raise fail("--example requires --outline", EXIT_USAGE_ERROR)

    try:
        correlator = Correlator.from_files(
            results_format or settings.results_format,
            files,
            case_sensitive=settings.case_sensitive and not ignore_case,
            strict=strict or settings.strict,
        )
    except ReportParseError as e:
        raise fail(str(e), EXIT_PARSE_ERROR) from e

    result = _query(correlator, Feature(name=feature), scenario, outline, example)

    if json_output:
        typer.echo(json.dumps(result.to_dict()))
    else:
        typer.echo(result.status)


def _query(
    correlator: Correlator,
    feature: Feature,
    scenario: str | None,
    outline: str | None,
    example: list[str] | None,
) -> TestResult:
    if outline:
        scenario_outline = ScenarioOutline(name=outline, feature=feature)
        if example:
            return correlator.get_example_result(scenario_outline, example)
        return correlator.get_scenario_outline_result(scenario_outline)
    if scenario:
        return correlator.get_scenario_result(Scenario(name=scenario, feature=feature))
    return correlator.get_feature_result(feature)
