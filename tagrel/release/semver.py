from __future__ import annotations

import semver as _semver

from tagrel.release.model import DerivedVersions

_PREFIX = "v"


def derive(version: str) -> DerivedVersions | None:
    """Parse ``vMAJOR.MINOR.PATCH[-prerelease][+build]`` into its release tiers.

    ``v1.2.3-rc1`` -> ``v1``, ``v1.2``, ``v1.2.3-rc1``. None if the version is
    not a prefixed full semantic version.
    """
    if not version.startswith(_PREFIX):
        return None
    body = version[len(_PREFIX) :]
    try:
        parsed = _semver.Version.parse(body)
    except ValueError:
        return None
    return DerivedVersions(
        major=f"{_PREFIX}{parsed.major}",
        major_minor=f"{_PREFIX}{parsed.major}.{parsed.minor}",
        exact=version,
    )
