"""vault-export: postprocessor pipeline for note-to-markdown export."""

from vault_export.context import Context, Frontmatter
from vault_export.errors import (
    InvalidDestinationRoot,
    MalformedNoteReference,
    MissingRequiredFrontmatterKey,
    PostprocessorError,
)
from vault_export.events import HARD_BREAK, SOFT_BREAK, Event, EventKind, MarkdownEvents
from vault_export.pipeline import PostprocessorPipeline
from vault_export.postprocessors import (
    AddAuthor,
    FilterByTags,
    Postprocessor,
    PostprocessorResult,
    add_author,
    add_embed_info,
    filter_by_tags,
    flat_hierarchy,
    remove_empty_aliases,
    softbreaks_to_hardbreaks,
)
from vault_export.references import NoteReference, slugify

__version__ = "0.1.0"

__all__ = [
    "AddAuthor",
    "Context",
    "Event",
    "EventKind",
    "FilterByTags",
    "Frontmatter",
    "HARD_BREAK",
    "InvalidDestinationRoot",
    "MalformedNoteReference",
    "MarkdownEvents",
    "MissingRequiredFrontmatterKey",
    "NoteReference",
    "Postprocessor",
    "PostprocessorError",
    "PostprocessorPipeline",
    "PostprocessorResult",
    "SOFT_BREAK",
    "add_author",
    "add_embed_info",
    "filter_by_tags",
    "flat_hierarchy",
    "remove_empty_aliases",
    "slugify",
    "softbreaks_to_hardbreaks",
]
