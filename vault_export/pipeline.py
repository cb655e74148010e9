"""PostprocessorPipeline: runs ordered postprocessors on one note at a time."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from vault_export.context import Context
from vault_export.events import MarkdownEvents
from vault_export.postprocessors import Postprocessor, PostprocessorResult

logger = logging.getLogger(__name__)


class PostprocessorPipeline:
    """Ordered, immutable list of postprocessors.

    Holds no per-note state, so a single instance can serve notes processed
    concurrently, each with its own Context and event stream.
    """

    def __init__(self, postprocessors: Iterable[Postprocessor]):
        self._postprocessors: tuple[Postprocessor, ...] = tuple(postprocessors)

    def __len__(self) -> int:
        return len(self._postprocessors)

    def __iter__(self) -> Iterator[Postprocessor]:
        return iter(self._postprocessors)

    def run(self, context: Context, events: MarkdownEvents) -> PostprocessorResult:
        """Apply each postprocessor in order.

        Returns STOP_AND_SKIP_NOTE as soon as one step asks for it; the note
        must then not be written. PostprocessorError propagates to the caller.
        """
        for postprocessor in self._postprocessors:
            result = postprocessor(context, events)
            if not isinstance(result, PostprocessorResult):
                raise TypeError(
                    f"{_name(postprocessor)} returned {result!r}, expected a PostprocessorResult"
                )
            if result is PostprocessorResult.STOP_AND_SKIP_NOTE:
                logger.debug(f"{_name(postprocessor)} skipped {context.current_file}")
                return result
        return PostprocessorResult.CONTINUE


def _name(postprocessor: Postprocessor) -> str:
    return getattr(postprocessor, "__name__", type(postprocessor).__name__)
