from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Required input is absent or the run configuration is unusable."""

    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class FormatError:
    ref_name: str

    @property
    def message(self) -> str:
        return f"invalid tag name: {self.ref_name}"


@dataclass(frozen=True, slots=True)
class VersionError:
    version: str

    @property
    def message(self) -> str:
        return f"invalid version: {self.version}"


@dataclass(frozen=True, slots=True)
class ToolMissing:
    tool: str
    hint: str

    @property
    def message(self) -> str:
        return f"{self.tool}: missing"


@dataclass(frozen=True, slots=True)
class AssetDirError:
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"list files: {self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class VCSError:
    ref: str
    returncode: int
    stderr: str

    @property
    def message(self) -> str:
        return f"get hash: git rev-parse {self.ref} failed (exit {self.returncode})"


@dataclass(frozen=True, slots=True)
class HostingError:
    tag: str
    args: tuple[str, ...]
    returncode: int
    stderr: str

    @property
    def message(self) -> str:
        return f"create GitHub release '{self.tag}' failed (exit {self.returncode})"


@dataclass(frozen=True, slots=True)
class HostingWarning:
    """A floating alias could not be deleted; creation still goes ahead."""

    tag: str
    stderr: str

    @property
    def message(self) -> str:
        return f"could not delete release '{self.tag}'"


ReleaseError = (
    ConfigError
    | FormatError
    | VersionError
    | ToolMissing
    | AssetDirError
    | VCSError
    | HostingError
)
