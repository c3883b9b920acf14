"""Stage sequencing for a release run.

Input resolution -> asset collection -> commit resolution -> publishing.
Each stage returns a Result; the first Err ends the run.
"""

from __future__ import annotations

from tagrel.core.result import Err, Ok, Result
from tagrel.output.console import ConsoleProtocol
from tagrel.release.assets import collect_assets
from tagrel.release.config import Config
from tagrel.release.errors import ReleaseError
from tagrel.release.gh import ensure_gh_available
from tagrel.release.git import ensure_git_available, resolve_commit
from tagrel.release.model import ReleasePlan, ReleaseRef, ReleaseReport
from tagrel.release.publisher import publish
from tagrel.release.ref import parse_ref_name, resolve_ref


def _resolve_input(config: Config) -> Result[ReleaseRef, ReleaseError]:
    if config.ref is not None:
        return parse_ref_name(config.ref)
    return resolve_ref(config.env, var=config.ref_env)


def plan_release(*, config: Config, console: ConsoleProtocol) -> Result[ReleasePlan, ReleaseError]:
    """Resolve the tag and collect assets. Never spawns a process."""
    ref = _resolve_input(config)
    if isinstance(ref, Err):
        return ref

    assets = collect_assets(root=config.root, component=ref.value.component, console=console)
    if isinstance(assets, Err):
        return assets

    return Ok(ReleasePlan(ref=ref.value, assets=assets.value))


def run_release(*, config: Config, console: ConsoleProtocol) -> Result[ReleaseReport, ReleaseError]:
    plan = plan_release(config=config, console=console)
    if isinstance(plan, Err):
        return plan

    git = ensure_git_available()
    if isinstance(git, Err):
        return git

    if not config.dry_run:
        gh = ensure_gh_available()
        if isinstance(gh, Err):
            return gh

    ref = plan.value.ref
    commit = resolve_commit(root=config.root, ref=ref.name)
    if isinstance(commit, Err):
        return commit

    created = publish(
        root=config.root,
        ref=ref,
        commit=commit.value,
        assets=plan.value.assets,
        console=console,
        dry_run=config.dry_run,
        repo=config.repo,
    )
    if isinstance(created, Err):
        return created

    return Ok(ReleaseReport(plan=plan.value, commit=commit.value, created=created.value))
