"""
Utility functions for the Jira progress MCP server.
"""

from .date import format_progress_date, format_timestamp, is_iso_day, parse_date
from .io import is_read_only_mode
from .logging import mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification
from .urls import browse_url, is_atlassian_cloud_url

__all__ = [
    "SSLIgnoreAdapter",
    "browse_url",
    "configure_ssl_verification",
    "format_progress_date",
    "format_timestamp",
    "is_atlassian_cloud_url",
    "is_iso_day",
    "is_read_only_mode",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
]
