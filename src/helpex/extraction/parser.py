"""Text normalization for help example code blocks.

Turns the raw text of one code block into command-line examples. Lines are
kept exactly as authored apart from prompt marker removal, so blank lines
survive as empty examples.
"""
from __future__ import annotations


# Interactive prompt prefix used by authored examples
PROMPT_MARKER = "PS C:\\> "


def strip_prompt_markers(text: str) -> str:
    """Remove every occurrence of the prompt marker from text."""
    return text.replace(PROMPT_MARKER, "")


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_examples(block_text: str) -> list[str]:
    """Split a code block into examples.

    - Strip prompt markers
    - Normalize line endings
    - Split on LF, keeping blank lines
    """
    text = normalize_newlines(strip_prompt_markers(block_text))
    return text.split("\n")
