"""Maps postprocessor names from config to configured postprocessors."""

from __future__ import annotations

from collections.abc import Callable

from vault_export.pipeline import PostprocessorPipeline
from vault_export.postprocessors import (
    AddAuthor,
    Postprocessor,
    add_embed_info,
    filter_by_tags,
    flat_hierarchy,
    remove_empty_aliases,
    softbreaks_to_hardbreaks,
)

from .loader import ConfigError
from .models import ExportConfig

_FACTORIES: dict[str, Callable[[ExportConfig], Postprocessor]] = {
    "add_author": lambda cfg: AddAuthor(cfg.author),
    "remove_empty_aliases": lambda cfg: remove_empty_aliases,
    "softbreaks_to_hardbreaks": lambda cfg: softbreaks_to_hardbreaks,
    "add_embed_info": lambda cfg: add_embed_info,
    "flat_hierarchy": lambda cfg: flat_hierarchy,
    "filter_by_tags": lambda cfg: filter_by_tags(cfg.filter.skip_tags, cfg.filter.only_tags),
}

POSTPROCESSOR_NAMES: tuple[str, ...] = tuple(_FACTORIES)


def build_postprocessors(names: list[str], config: ExportConfig) -> list[Postprocessor]:
    unknown = [n for n in names if n not in _FACTORIES]
    if unknown:
        raise ConfigError(
            f"Unknown postprocessor(s): {', '.join(unknown)}. "
            f"Available: {', '.join(POSTPROCESSOR_NAMES)}"
        )
    return [_FACTORIES[name](config) for name in names]


def build_pipeline(config: ExportConfig, embeds: bool = False) -> PostprocessorPipeline:
    """Pipeline for regular notes, or for embedded notes when ``embeds`` is set."""
    names = config.embed_postprocessors if embeds else config.postprocessors
    return PostprocessorPipeline(build_postprocessors(names, config))
