"""Example extraction for helpex.

This module reads MAML help documents and flattens their developer code
samples into an ordered corpus of command-line examples.
"""
from __future__ import annotations

from helpex.extraction.parser import PROMPT_MARKER, normalize_newlines, split_examples, strip_prompt_markers
from helpex.extraction.document import (
    DEV_NAMESPACE,
    Corpus,
    DocumentMalformedError,
    DocumentUnavailableError,
    HelpDocumentError,
    extract_examples,
    extract_examples_from_text,
    iter_code_blocks,
    load_help_document,
    parse_help_text,
)

__all__ = [
    "PROMPT_MARKER",
    "normalize_newlines",
    "split_examples",
    "strip_prompt_markers",
    "DEV_NAMESPACE",
    "Corpus",
    "DocumentMalformedError",
    "DocumentUnavailableError",
    "HelpDocumentError",
    "extract_examples",
    "extract_examples_from_text",
    "iter_code_blocks",
    "load_help_document",
    "parse_help_text",
]
