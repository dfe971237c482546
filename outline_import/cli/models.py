"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed (per-file import failures included)
    - GENERAL_ERROR (1): Configuration or traversal error
    - AUTH_ERROR (3): Outline rejected the API token
    - NETWORK_ERROR (4): Outline unreachable or returned an error

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4
