# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
from pathlib import Path

from click.testing import Result
from typer.testing import CliRunner

from cluster_validations.cli.main import app

runner = CliRunner()


def run_cli_with_settings(
    tmp_path: Path, content: str, additional_args: list[str] | None = None
) -> Result:
    """Run CLI against a settings file written to a temporary directory."""
    args = additional_args or []
    settings = tmp_path / "settings.yaml"
    settings.write_text(content)
    return runner.invoke(app, ["-s", str(settings)] + args)
