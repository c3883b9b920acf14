from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DerivedVersions:
    major: str  # v1
    major_minor: str  # v1.2
    exact: str  # v1.2.3


@dataclass(frozen=True, slots=True)
class ReleaseRef:
    """A triggering tag split into its component and parsed version."""

    component: str
    versions: DerivedVersions

    @property
    def version(self) -> str:
        return self.versions.exact

    @property
    def name(self) -> str:
        return f"{self.component}/{self.version}"


@dataclass(frozen=True, slots=True)
class ReleaseTarget:
    tag: str
    version: str
    # Floating aliases are deleted and recreated so they can move to a new commit.
    deletable: bool


def release_targets(component: str, versions: DerivedVersions) -> tuple[ReleaseTarget, ...]:
    """Major, major.minor, then exact; only the exact release is never deleted."""
    return tuple(
        ReleaseTarget(tag=f"{component}/{version}", version=version, deletable=deletable)
        for version, deletable in (
            (versions.major, True),
            (versions.major_minor, True),
            (versions.exact, False),
        )
    )


@dataclass(frozen=True, slots=True)
class ReleasePlan:
    ref: ReleaseRef
    assets: tuple[Path, ...]

    @property
    def targets(self) -> tuple[ReleaseTarget, ...]:
        return release_targets(self.ref.component, self.ref.versions)


@dataclass(frozen=True, slots=True)
class ReleaseReport:
    plan: ReleasePlan
    commit: str
    created: tuple[str, ...]

    @property
    def short_commit(self) -> str:
        return self.commit[:8]
