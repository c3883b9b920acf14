"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagrel.core.errors import ErrorCode
from tagrel.release.errors import (
    AssetDirError,
    ConfigError,
    FormatError,
    HostingError,
    ReleaseError,
    ToolMissing,
    VCSError,
    VersionError,
)

if TYPE_CHECKING:
    from tagrel.output.console import ConsoleProtocol

__all__ = ["error_line", "print_release_error", "release_error_exit_code"]


def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


def error_line(error: ReleaseError) -> str:
    """Render a fatal error as a single diagnostic line.

    The first non-blank line of tool stderr, or the remediation hint, is
    appended to the message.
    """
    match error:
        case ConfigError(hint=str() as hint) | ToolMissing(hint=hint):
            return f"{error.message} ({hint})"
        case VCSError(stderr=stderr) | HostingError(stderr=stderr):
            detail = _first_line(stderr)
            return f"{error.message}: {detail}" if detail else error.message
    return error.message


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    console.error(error_line(error))


def release_error_exit_code(error: ReleaseError) -> int:
    match error:
        case ConfigError() | FormatError() | VersionError():
            return int(ErrorCode.USER_ERROR)
        case ToolMissing():
            return int(ErrorCode.ENV_ERROR)
        case AssetDirError():
            return int(ErrorCode.IO_ERROR)
        case VCSError():
            return int(ErrorCode.VCS_ERROR)
        case HostingError():
            return int(ErrorCode.HOSTING_ERROR)
    return int(ErrorCode.USER_ERROR)
