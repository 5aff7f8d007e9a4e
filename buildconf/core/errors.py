"""Error codes for CLI exit status.

Every command maps its failure to one of these codes so CI scripts can tell a
bad invocation apart from a broken project manifest.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad arguments, unknown module or task)
    - 2: Environment error (missing manifest or secrets file)
    - 3: Configuration error (allow-list or compiler target inconsistency)
    - 5: I/O error (file unreadable)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    CONFIG_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
