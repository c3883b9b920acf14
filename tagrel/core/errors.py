"""Error codes for CLI exit status.

Each fatal failure class of a release run maps to one stable exit code so CI
logs can tell a bad tag apart from a broken checkout or a GitHub outage.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (missing or malformed tag, invalid version)
    - 2: Environment error (git or gh not installed)
    - 3: I/O error (asset directory unreadable)
    - 4: VCS error (tag cannot be resolved to a commit)
    - 5: Hosting error (release creation failed)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 3
    VCS_ERROR = 4
    HOSTING_ERROR = 5
