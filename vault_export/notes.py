"""Minimal note loading for running the pipeline outside a full export."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel

from vault_export.context import Context
from vault_export.errors import PostprocessorError
from vault_export.events import SOFT_BREAK, Event, EventKind, MarkdownEvents
from vault_export.pipeline import PostprocessorPipeline
from vault_export.postprocessors import PostprocessorResult

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---\n(.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)


class NoteOutcome(BaseModel):
    file: str
    status: Literal["written", "skipped", "error"]
    destination: str | None = None
    error: str | None = None


def split_frontmatter(content: str) -> tuple[dict, str]:
    """Extract YAML frontmatter and body from markdown content."""
    m = _FRONTMATTER_RE.match(content)
    if m is None:
        return {}, content
    metadata = yaml.safe_load(m.group(1)) or {}
    if not isinstance(metadata, dict):
        raise ValueError(f"frontmatter must be a mapping, got {type(metadata).__name__}")
    return metadata, content[m.end():]


def body_to_events(body: str) -> MarkdownEvents:
    """Line-level event stream: paragraphs of text runs joined by soft breaks."""
    events: MarkdownEvents = []
    paragraph: list[str] = []

    def _flush() -> None:
        if not paragraph:
            return
        events.append(Event(EventKind.start, "paragraph"))
        for i, line in enumerate(paragraph):
            if i:
                events.append(SOFT_BREAK)
            events.append(Event.text(line))
        events.append(Event(EventKind.end, "paragraph"))
        paragraph.clear()

    for line in body.splitlines():
        if line.strip():
            paragraph.append(line)
        else:
            _flush()
    _flush()
    return events


def process_note(
    source: Path,
    destination: Path,
    pipeline: PostprocessorPipeline,
    root: Path | None = None,
) -> NoteOutcome:
    """Run ``pipeline`` over one note file. Nothing is written to disk.

    When ``root`` is given it is exposed to the postprocessors as the
    ``destination`` frontmatter key (consumed by flat_hierarchy).
    """
    try:
        metadata, body = split_frontmatter(source.read_text())
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error(f"Error reading {source}: {exc}")
        return NoteOutcome(file=str(source), status="error", error=str(exc))

    context = Context(source, destination, metadata)
    if root is not None:
        context.frontmatter["destination"] = str(root)
    events = body_to_events(body)

    try:
        result = pipeline.run(context, events)
    except PostprocessorError as exc:
        logger.error(f"Error processing {source}: {exc}")
        return NoteOutcome(file=str(source), status="error", error=str(exc))

    if result is PostprocessorResult.STOP_AND_SKIP_NOTE:
        logger.info(f"Skipped: {source}")
        return NoteOutcome(file=str(source), status="skipped")
    return NoteOutcome(file=str(source), status="written", destination=str(context.destination))
