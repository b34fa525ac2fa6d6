"""Help document loading and example extraction.

Reads a MAML help file, finds every developer code sample and flattens
them into the ordered corpus served by the predictor.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator

from helpex.extraction.parser import split_examples

logger = logging.getLogger(__name__)


DEV_NAMESPACE = "http://schemas.microsoft.com/maml/dev/2004/10"
NAMESPACES = {"dev": DEV_NAMESPACE}

# Code samples anywhere below the document element
_CODE_PATH = ".//dev:code"

Corpus = tuple[str, ...]


class HelpDocumentError(RuntimeError):
    pass


class DocumentUnavailableError(HelpDocumentError):
    pass


class DocumentMalformedError(HelpDocumentError):
    pass


def parse_help_text(text: str | bytes, *, source: str = "<string>") -> ET.Element:
    """Parse help document content and return its document element."""
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise DocumentMalformedError(f"Failed to parse help document: {source} ({exc})") from exc


def load_help_document(path: Path | str) -> ET.Element:
    """Read and parse the help document at path.

    Raises DocumentUnavailableError when the file cannot be read and
    DocumentMalformedError when it is not well-formed XML.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise DocumentUnavailableError(f"Help document unavailable: {path} ({exc})") from exc
    return parse_help_text(data, source=str(path))


def iter_code_blocks(root: ET.Element) -> Iterator[str]:
    """Yield the full text of each code sample in document order."""
    for node in root.iterfind(_CODE_PATH, NAMESPACES):
        yield "".join(node.itertext())


def extract_examples_from_root(root: ET.Element) -> Corpus:
    examples: list[str] = []
    block_count = 0
    for block in iter_code_blocks(root):
        block_count += 1
        examples.extend(split_examples(block))
    logger.info("Extracted %d examples from %d code blocks", len(examples), block_count)
    return tuple(examples)


def extract_examples_from_text(text: str | bytes, *, source: str = "<string>") -> Corpus:
    """Extract the example corpus from in-memory help document content."""
    return extract_examples_from_root(parse_help_text(text, source=source))


def extract_examples(path: Path | str) -> Corpus:
    """Extract the example corpus from the help document at path."""
    try:
        root = load_help_document(path)
    except HelpDocumentError as exc:
        logger.error("Example extraction failed: %s", exc)
        raise
    return extract_examples_from_root(root)
