"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest


MAML_HELP = """<?xml version="1.0" encoding="utf-8"?>
<helpItems schema="maml" xmlns="http://msh">
  <command:command xmlns:maml="http://schemas.microsoft.com/maml/2004/10"
                   xmlns:command="http://schemas.microsoft.com/maml/dev/command/2004/10"
                   xmlns:dev="http://schemas.microsoft.com/maml/dev/2004/10">
    <command:details>
      <command:name>Get-Mailbox</command:name>
    </command:details>
    <command:examples>
      <command:example>
        <maml:title>Example 1</maml:title>
        <dev:code>PS C:\\> Get-Mailbox -Identity user1
PS C:\\> Get-MailboxStatistics -Identity user1</dev:code>
        <dev:remarks><maml:para>Gets a mailbox.</maml:para></dev:remarks>
      </command:example>
    </command:examples>
  </command:command>
  <command:command xmlns:command="http://schemas.microsoft.com/maml/dev/command/2004/10"
                   xmlns:dev="http://schemas.microsoft.com/maml/dev/2004/10">
    <command:examples>
      <command:example>
        <dev:code>PS C:\\> Set-Mailbox -Identity user1 -Quota 10GB</dev:code>
      </command:example>
    </command:examples>
  </command:command>
</helpItems>
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def help_xml(temp_dir: Path) -> Path:
    """Create a temporary MAML help file with two code samples."""
    path = temp_dir / "EWS-help.xml"
    path.write_text(MAML_HELP, encoding="utf-8")
    return path


@pytest.fixture
def make_help() -> Callable[..., str]:
    """Build a minimal help document containing the given code blocks."""

    def _make(*blocks: str) -> str:
        body = "".join(f"<item><dev:code>{b}</dev:code></item>" for b in blocks)
        return (
            '<helpItems xmlns:dev="http://schemas.microsoft.com/maml/dev/2004/10">'
            f"{body}</helpItems>"
        )

    return _make
