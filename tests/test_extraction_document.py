"""Tests for helpex.extraction.document module."""
from __future__ import annotations

from pathlib import Path

import pytest

from helpex.extraction.document import (
    DocumentMalformedError,
    DocumentUnavailableError,
    HelpDocumentError,
    extract_examples,
    extract_examples_from_text,
    iter_code_blocks,
    load_help_document,
    parse_help_text,
)


class TestLoadHelpDocument:
    """Tests for reading and parsing the help file."""

    def test_missing_file_raises_unavailable(self, temp_dir: Path):
        with pytest.raises(DocumentUnavailableError, match="unavailable"):
            load_help_document(temp_dir / "missing.xml")

    def test_directory_raises_unavailable(self, temp_dir: Path):
        with pytest.raises(DocumentUnavailableError):
            load_help_document(temp_dir)

    def test_malformed_raises(self, temp_dir: Path):
        path = temp_dir / "bad.xml"
        path.write_text("<helpItems><unclosed>", encoding="utf-8")
        with pytest.raises(DocumentMalformedError, match="Failed to parse"):
            load_help_document(path)

    def test_errors_share_base(self):
        assert issubclass(DocumentUnavailableError, HelpDocumentError)
        assert issubclass(DocumentMalformedError, HelpDocumentError)

    def test_loads_valid_file(self, help_xml: Path):
        root = load_help_document(help_xml)
        assert root.tag == "{http://msh}helpItems"

    def test_accepts_str_path(self, help_xml: Path):
        assert load_help_document(str(help_xml)) is not None


class TestIterCodeBlocks:
    """Tests for code sample selection."""

    def test_finds_nested_blocks_in_order(self, make_help):
        root = parse_help_text(make_help("first", "second"))
        assert list(iter_code_blocks(root)) == ["first", "second"]

    def test_ignores_other_namespaces(self):
        root = parse_help_text(
            '<r xmlns:dev="http://schemas.microsoft.com/maml/dev/2004/10" xmlns:x="urn:other">'
            "<x:code>nope</x:code><code>nope</code><dev:code>yes</dev:code></r>"
        )
        assert list(iter_code_blocks(root)) == ["yes"]

    def test_root_element_is_not_a_block(self):
        root = parse_help_text('<code xmlns="http://schemas.microsoft.com/maml/dev/2004/10">x</code>')
        assert list(iter_code_blocks(root)) == []

    def test_includes_descendant_text(self, make_help):
        root = parse_help_text(make_help("Get-<b>Item</b> -Path x"))
        assert list(iter_code_blocks(root)) == ["Get-Item -Path x"]

    def test_empty_element(self, make_help):
        root = parse_help_text(make_help(""))
        assert list(iter_code_blocks(root)) == [""]


class TestExtractExamples:
    """Tests for the full extraction pipeline."""

    def test_mailbox_scenario(self, make_help):
        text = make_help("PS C:\\&gt; Get-Mailbox -Identity user1\nPS C:\\&gt; Get-MailboxStatistics -Identity user1")
        assert extract_examples_from_text(text) == (
            "Get-Mailbox -Identity user1",
            "Get-MailboxStatistics -Identity user1",
        )

    def test_line_count_matches_blocks(self, make_help):
        text = make_help("a\nb\nc", "d", "e\nf")
        corpus = extract_examples_from_text(text)
        assert corpus == ("a", "b", "c", "d", "e", "f")

    def test_blank_lines_preserved(self, make_help):
        corpus = extract_examples_from_text(make_help("a\n\nb"))
        assert corpus == ("a", "", "b")

    def test_no_blocks_gives_empty_corpus(self):
        assert extract_examples_from_text("<helpItems/>") == ()

    def test_crlf_normalized(self, make_help):
        corpus = extract_examples_from_text(make_help("a&#13;\nb"))
        assert corpus == ("a", "b")

    def test_no_deduplication(self, make_help):
        corpus = extract_examples_from_text(make_help("Get-Item", "Get-Item"))
        assert corpus == ("Get-Item", "Get-Item")

    def test_from_file(self, help_xml: Path):
        assert extract_examples(help_xml) == (
            "Get-Mailbox -Identity user1",
            "Get-MailboxStatistics -Identity user1",
            "Set-Mailbox -Identity user1 -Quota 10GB",
        )

    def test_idempotent(self, help_xml: Path):
        assert extract_examples(help_xml) == extract_examples(help_xml)

    def test_from_bytes(self, help_xml: Path):
        assert extract_examples_from_text(help_xml.read_bytes()) == extract_examples(help_xml)

    def test_missing_file_propagates(self, temp_dir: Path):
        with pytest.raises(DocumentUnavailableError):
            extract_examples(temp_dir / "EWS-help.xml")

    def test_malformed_text_raises(self):
        with pytest.raises(DocumentMalformedError):
            extract_examples_from_text("not xml at all <<<")
