"""Run configuration.

A release run is configured entirely from the process environment and CLI
options; nothing is read from disk.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from tagrel.core.result import Err, Ok, Result
from tagrel.release.errors import ConfigError

__all__ = ["DEFAULT_REF_ENV", "Config", "load_config"]

# Set by GitHub Actions to the short name of the ref that triggered the run.
DEFAULT_REF_ENV = "GITHUB_REF_NAME"


def _environ() -> Mapping[str, str]:
    return os.environ


@dataclass(frozen=True, slots=True)
class Config:
    """Settings for one release run.

    Attributes:
        root: Directory holding the component directories; git and gh run here.
        ref_env: Name of the environment variable holding the reference name.
        ref: Explicit reference name; takes precedence over ``ref_env``.
        repo: ``owner/name`` passed to gh, or None to let gh infer it.
        dry_run: Print gh commands instead of executing them.
        env: Environment the reference name is read from.
    """

    root: Path
    ref_env: str = DEFAULT_REF_ENV
    ref: str | None = None
    repo: str | None = None
    dry_run: bool = False
    env: Mapping[str, str] = field(default_factory=_environ)


def load_config(
    *,
    root: Path | None = None,
    ref_env: str = DEFAULT_REF_ENV,
    ref: str | None = None,
    repo: str | None = None,
    dry_run: bool = False,
    env: Mapping[str, str] | None = None,
) -> Result[Config, ConfigError]:
    """Build a :class:`Config` from CLI options.

    Returns:
        Ok(Config), or Err(ConfigError) if an option is malformed. The root
        directory is not touched here; listing it is the asset stage's job.
    """
    if not ref_env.strip():
        return Err(ConfigError(message="empty reference variable name", hint="Pass --ref-env NAME."))

    if repo is not None and (repo.count("/") != 1 or "" in repo.split("/")):
        return Err(ConfigError(message=f"invalid repo: {repo}", hint="Expected OWNER/NAME."))

    return Ok(
        Config(
            root=Path.cwd() if root is None else root.expanduser(),
            ref_env=ref_env.strip(),
            ref=ref,
            repo=repo,
            dry_run=dry_run,
            env=os.environ if env is None else env,
        )
    )
