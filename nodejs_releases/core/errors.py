"""Error codes for CLI exit status.

These values map to shell exit codes and are used by the CLI front end to
report which kind of failure stopped a command.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad arguments, unknown release version)
    - 2: Config error (config file unreadable or malformed)
    - 4: Network error (release index unreachable or unparseable)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    NETWORK_ERROR = 4
