"""
Constants and default values for model conversions.

Centralizes the fallbacks used when Jira omits a value, so the models and
the progress template agree on a single source of truth.
"""

EMPTY_STRING = ""
UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"
NONE_VALUE = "None"

JIRA_DEFAULT_ID = "0"
JIRA_DEFAULT_KEY = "UNKNOWN-0"

# Week-of label used by the progress template when no date is known
DATE_PLACEHOLDER = "[date]"
