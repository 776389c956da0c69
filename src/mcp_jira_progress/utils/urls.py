"""URL helpers for telling Jira Cloud apart from Server/Data Center."""

import ipaddress
from urllib.parse import urlparse

CLOUD_DOMAINS = (".atlassian.net", ".jira.com", ".jira-dev.com")


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud.

    Localhost and private or loopback IP addresses are always treated as
    Server/Data Center.

    Args:
        url: The Jira base URL

    Returns:
        True for an Atlassian Cloud site, False otherwise
    """
    if not url:
        return False

    hostname = (urlparse(url).hostname or "").lower()
    if hostname == "localhost":
        return False

    try:
        address = ipaddress.ip_address(hostname)
    except ValueError:
        address = None
    if address is not None:
        return False

    return hostname.endswith(CLOUD_DOMAINS)


def browse_url(base_url: str, issue_key: str) -> str:
    """Build the human-facing link for an issue."""
    return f"{base_url.rstrip('/')}/browse/{issue_key}"
