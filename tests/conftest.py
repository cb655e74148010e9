"""Shared test fixtures for vault-export."""

import pytest
from pathlib import Path

from vault_export.context import Context
from vault_export.events import HARD_BREAK, SOFT_BREAK, Event, EventKind
from vault_export.config.models import ExportConfig


@pytest.fixture
def sample_context():
    return Context(
        Path("vault/notes/Daily Note.md"),
        Path("/out/notes/Daily Note.md"),
        {"title": "Daily Note", "tags": ["journal", "publish"], "aliases": ["today"]},
    )


@pytest.fixture
def sample_events():
    """A paragraph with two soft breaks, one hard break and some opaque events."""
    return [
        Event(EventKind.start, "paragraph"),
        Event.text("first line"),
        SOFT_BREAK,
        Event.text("second line"),
        HARD_BREAK,
        Event.text("third line"),
        SOFT_BREAK,
        Event(EventKind.code, "x = 1"),
        Event(EventKind.end, "paragraph"),
    ]


@pytest.fixture
def sample_config():
    return ExportConfig()


@pytest.fixture
def embed_context():
    return Context(
        Path("vault/Note.md"),
        Path("/out/Note.md"),
        {"embed_link": "Note#Section|Label", "id": "generated-id"},
    )
