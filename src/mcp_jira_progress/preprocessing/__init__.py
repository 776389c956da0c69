"""Conversion between plain text and Atlassian Document Format (ADF)."""

from .adf import extract_text, is_adf_document, text_to_adf

__all__ = ["extract_text", "is_adf_document", "text_to_adf"]
