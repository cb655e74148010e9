"""Errors raised by postprocessors when a note violates their preconditions."""

from __future__ import annotations

from pathlib import Path


class PostprocessorError(Exception):
    """Fatal error for the note being processed."""

    def __init__(self, message: str, file: Path | None = None) -> None:
        self.file = file
        if file is not None:
            message = f"{file}: {message}"
        super().__init__(message)


class MissingRequiredFrontmatterKey(PostprocessorError):
    """A required control key is absent or not a string."""

    def __init__(self, key: str, file: Path | None = None) -> None:
        self.key = key
        super().__init__(f"missing required frontmatter key '{key}' (or it is not a string)", file)


class InvalidDestinationRoot(PostprocessorError):
    """The note destination does not live under the configured root."""

    def __init__(self, destination: Path, root: Path, file: Path | None = None) -> None:
        self.destination = destination
        self.root = root
        super().__init__(f"destination {destination} is not under root {root}", file)


class MalformedNoteReference(PostprocessorError):
    """A link or embed target names neither a note nor a section."""

    def __init__(self, text: str, file: Path | None = None) -> None:
        self.text = text
        super().__init__(f"malformed note reference {text!r}", file)
