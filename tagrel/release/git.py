from __future__ import annotations

import shutil
from pathlib import Path

from tagrel.core.result import Err, Ok, Result
from tagrel.platform.process import run as run_process
from tagrel.release.errors import ReleaseError, ToolMissing, VCSError

which = shutil.which


def ensure_git_available() -> Result[None, ReleaseError]:
    if which("git") is None:
        return Err(ToolMissing(tool="git", hint="Install git: https://git-scm.com/downloads"))
    return Ok(None)


def resolve_commit(*, root: Path, ref: str) -> Result[str, ReleaseError]:
    """Resolve tag ``ref`` to the commit it points at.

    Annotated tags are peeled, so the hash is always a commit and never a tag
    object.
    """
    result = run_process(
        ["git", "rev-parse", "--verify", f"refs/tags/{ref}^{{commit}}"],
        cwd=root,
    )
    if isinstance(result, Err):
        e = result.error
        return Err(VCSError(ref=ref, returncode=e.returncode, stderr=e.stderr))

    commit = result.value.strip()
    if not commit:
        return Err(VCSError(ref=ref, returncode=0, stderr="git rev-parse printed no hash"))
    return Ok(commit)
