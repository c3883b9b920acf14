from __future__ import annotations

from collections.abc import Mapping

from tagrel.core.result import Err, Ok, Result
from tagrel.release.errors import ConfigError, FormatError, ReleaseError, VersionError
from tagrel.release.model import ReleaseRef
from tagrel.release.semver import derive


def parse_ref_name(name: str) -> Result[ReleaseRef, ReleaseError]:
    """Split ``component/version`` and validate the version half."""
    parts = name.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return Err(FormatError(ref_name=name))

    component, version = parts
    versions = derive(version)
    if versions is None:
        return Err(VersionError(version=version))

    return Ok(ReleaseRef(component=component, versions=versions))


def resolve_ref(env: Mapping[str, str], *, var: str) -> Result[ReleaseRef, ReleaseError]:
    """Read the triggering reference name from ``env[var]`` and parse it."""
    name = env.get(var, "")
    if not name:
        return Err(
            ConfigError(
                message=f"missing env var {var}",
                hint="Run from a tag-triggered workflow or pass --ref.",
            )
        )
    return parse_ref_name(name)
