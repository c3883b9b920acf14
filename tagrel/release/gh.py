from __future__ import annotations

import shutil
from collections.abc import Sequence
from pathlib import Path

from tagrel.core.result import Err, Ok, Result
from tagrel.output.console import ConsoleProtocol, Style
from tagrel.platform.process import run as run_process
from tagrel.release.errors import HostingError, HostingWarning, ReleaseError, ToolMissing

which = shutil.which


def ensure_gh_available() -> Result[None, ReleaseError]:
    if which("gh") is None:
        return Err(ToolMissing(tool="gh", hint="Install GitHub CLI: https://cli.github.com/"))
    return Ok(None)


def _with_repo(args: list[str], repo: str | None) -> list[str]:
    if repo is None:
        return args
    return [*args, "--repo", repo]


def delete_release(
    *,
    root: Path,
    tag: str,
    repo: str | None,
    console: ConsoleProtocol,
    dry_run: bool,
) -> Result[None, HostingWarning]:
    """Delete the release at ``tag`` together with its git tag."""
    cmd = ["gh", *_with_repo(["release", "delete", "--cleanup-tag", "--yes"], repo), tag]
    console.print(" ".join(cmd), Style.DIM)
    if dry_run:
        return Ok(None)

    result = run_process(cmd, cwd=root)
    if isinstance(result, Err):
        return Err(HostingWarning(tag=tag, stderr=result.error.stderr))
    return Ok(None)


def create_release(
    *,
    root: Path,
    tag: str,
    target: str,
    assets: Sequence[Path],
    repo: str | None,
    console: ConsoleProtocol,
    dry_run: bool,
) -> Result[None, ReleaseError]:
    """Create a release at ``tag`` pointing at ``target`` with ``assets`` attached.

    gh creates the tag itself when it does not exist yet.
    """
    args = _with_repo(["release", "create", "--target", target], repo)
    args += [tag, *(str(p) for p in assets)]
    cmd = ["gh", *args]
    console.print(" ".join(cmd), Style.DIM)
    if dry_run:
        return Ok(None)

    result = run_process(cmd, cwd=root)
    if isinstance(result, Err):
        e = result.error
        return Err(
            HostingError(tag=tag, args=tuple(args), returncode=e.returncode, stderr=e.stderr)
        )
    return Ok(None)
