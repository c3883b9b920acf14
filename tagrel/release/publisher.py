from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from tagrel.core.result import Err, Ok, Result
from tagrel.output.console import ConsoleProtocol
from tagrel.release.errors import ReleaseError
from tagrel.release.gh import create_release, delete_release
from tagrel.release.model import ReleaseRef, release_targets


def publish(
    *,
    root: Path,
    ref: ReleaseRef,
    commit: str,
    assets: Sequence[Path],
    console: ConsoleProtocol,
    dry_run: bool,
    repo: str | None = None,
) -> Result[tuple[str, ...], ReleaseError]:
    """Publish the major, major.minor and exact releases, in that order.

    Floating aliases are deleted first so they can be recreated on ``commit``;
    a failed delete is only a warning. The first failed create stops the loop
    and earlier releases are left in place.

    Returns:
        Ok(created tags) or Err(HostingError) for the first failed create.
    """
    created: list[str] = []
    for target in release_targets(ref.component, ref.versions):
        console.header(target.tag)

        if target.deletable:
            deleted = delete_release(
                root=root,
                tag=target.tag,
                repo=repo,
                console=console,
                dry_run=dry_run,
            )
            if isinstance(deleted, Err):
                console.warning(deleted.error.message)

        result = create_release(
            root=root,
            tag=target.tag,
            target=commit,
            assets=assets,
            repo=repo,
            console=console,
            dry_run=dry_run,
        )
        if isinstance(result, Err):
            return result

        console.success(f"release {target.tag} -> {commit[:8]}")
        created.append(target.tag)

    return Ok(tuple(created))
