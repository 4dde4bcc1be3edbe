# -*- coding: utf-8 -*-

# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

import logging
from pathlib import Path
from typing import NoReturn

import errorhandler

import typer
from typing_extensions import Annotated

import cluster_validations
from cluster_validations.settings import (
    SettingsError,
    load_settings,
    validate_settings,
)
from cluster_validations.utils.logging import configure_logging, VerbosityLevel
from cluster_validations.utils.terminal import terminal


app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)

error_handler = errorhandler.ErrorHandler()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cluster-validate, version {cluster_validations.__version__}")
        raise typer.Exit()


Verbosity = Annotated[
    VerbosityLevel,
    typer.Option(
        "-v",
        "--verbosity",
        help="Verbosity level.",
        envvar="CLUSTER_VALIDATE_VERBOSITY",
        is_eager=True,
    ),
]


Settings = Annotated[
    Path,
    typer.Option(
        "-s",
        "--settings",
        exists=True,
        dir_okay=False,
        file_okay=True,
        help="Path to the cluster settings YAML file.",
        envvar="CLUSTER_VALIDATE_SETTINGS",
    ),
]


Version = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=version_callback,
        help="Display version number.",
        is_eager=True,
    ),
]


@app.command()
def main(
    settings: Settings,
    verbosity: Verbosity = VerbosityLevel.WARNING,
    version: Version = False,
) -> None:
    """A CLI tool to validate cluster settings before they are applied."""
    configure_logging(verbosity, error_handler)

    try:
        cluster_settings = load_settings(settings)
    except SettingsError as e:
        logger.error(str(e))
        exit(failed=True)

    report = validate_settings(cluster_settings)
    for issue in report.issues:
        typer.echo(terminal.format_issue(issue.field, issue.status, issue.message))
        logger.error("Setting '%s' is not valid", issue.field)

    typer.echo(terminal.format_summary(len(report.checked), len(report.issues)))
    exit(failed=not report.passed)


def exit(failed: bool = False) -> NoReturn:
    if failed or error_handler.fired:
        raise typer.Exit(1)
    else:
        raise typer.Exit(0)
