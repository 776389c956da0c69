"""I/O utility functions for the Jira progress server."""

import os


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode hides and blocks every tool that writes to Jira
    (comments, field updates, progress updates, issue creation, labels).

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    value = os.getenv("READ_ONLY_MODE", "false")
    return value.lower() in ("true", "1", "yes", "y", "on")
