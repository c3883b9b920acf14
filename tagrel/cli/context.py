from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from tagrel.core.errors import ErrorCode
from tagrel.core.result import Err
from tagrel.output.console import ConsoleProtocol, RichConsole
from tagrel.output.errors import error_line
from tagrel.release.config import Config, load_config


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    # Fatal diagnostics go to stderr so stdout stays usable in CI logs.
    err_console: ConsoleProtocol


def build_context(
    *,
    root: Path | None,
    ref_env: str,
    ref: str | None,
    repo: str | None = None,
    dry_run: bool = False,
) -> CLIContext:
    config_result = load_config(root=root, ref_env=ref_env, ref=ref, repo=repo, dry_run=dry_run)
    if isinstance(config_result, Err):
        typer.echo(f"error: {error_line(config_result.error)}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        config=config_result.value,
        console=RichConsole(),
        err_console=RichConsole(stderr=True),
    )
