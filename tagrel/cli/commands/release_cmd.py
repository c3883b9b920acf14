from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from tagrel.cli.context import CLIContext, build_context
from tagrel.core.result import Err
from tagrel.output.console import Style
from tagrel.output.errors import print_release_error, release_error_exit_code
from tagrel.release.config import DEFAULT_REF_ENV
from tagrel.release.errors import ReleaseError
from tagrel.release.service import plan_release, run_release


def _fail(ctx: CLIContext, error: ReleaseError) -> NoReturn:
    print_release_error(error, ctx.err_console)
    raise typer.Exit(code=release_error_exit_code(error))


def publish(
    ref: str | None = typer.Option(
        None, "--ref", help="Tag to release (component/vX.Y.Z); overrides --ref-env."
    ),
    ref_env: str = typer.Option(
        DEFAULT_REF_ENV, "--ref-env", help="Environment variable holding the tag."
    ),
    root: Path | None = typer.Option(
        None, "--root", help="Directory containing the component directories (default: cwd)."
    ),
    repo: str | None = typer.Option(None, "--repo", help="Target repository (OWNER/NAME)."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print gh commands without running them."),
) -> None:
    """Create the major, minor and exact releases for a tag."""
    ctx = build_context(root=root, ref_env=ref_env, ref=ref, repo=repo, dry_run=dry_run)

    result = run_release(config=ctx.config, console=ctx.console)
    if isinstance(result, Err):
        _fail(ctx, result.error)

    report = result.value
    suffix = " (dry-run)" if dry_run else ""
    ctx.console.print("")
    ctx.console.success(
        f"{len(report.created)} releases for {report.plan.ref.name} at {report.short_commit}{suffix}"
    )


def plan(
    ref: str | None = typer.Option(
        None, "--ref", help="Tag to release (component/vX.Y.Z); overrides --ref-env."
    ),
    ref_env: str = typer.Option(
        DEFAULT_REF_ENV, "--ref-env", help="Environment variable holding the tag."
    ),
    root: Path | None = typer.Option(
        None, "--root", help="Directory containing the component directories (default: cwd)."
    ),
) -> None:
    """Show the releases and assets a publish would produce."""
    ctx = build_context(root=root, ref_env=ref_env, ref=ref)

    result = plan_release(config=ctx.config, console=ctx.console)
    if isinstance(result, Err):
        _fail(ctx, result.error)

    release_plan = result.value
    ctx.console.header(f"Releases for {release_plan.ref.name}")
    for target in release_plan.targets:
        marker = "replace" if target.deletable else "create"
        ctx.console.print(f"  {target.tag} ({marker})")

    ctx.console.header("Assets")
    if not release_plan.assets:
        ctx.console.print("  (none)", Style.DIM)
    for path in release_plan.assets:
        ctx.console.print(f"  {path.as_posix()}")
