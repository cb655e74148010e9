from pydantic import BaseModel, Field
from typing import Literal

from vault_export.postprocessors import DEFAULT_AUTHOR


class TagFilterConfig(BaseModel):
    skip_tags: list[str] = Field(default_factory=list)
    only_tags: list[str] = Field(default_factory=list)


class ExportConfig(BaseModel):
    author: str = DEFAULT_AUTHOR
    filter: TagFilterConfig = Field(default_factory=TagFilterConfig)
    postprocessors: list[str] = Field(default_factory=lambda: [
        "filter_by_tags", "remove_empty_aliases", "softbreaks_to_hardbreaks"
    ])
    embed_postprocessors: list[str] = Field(default_factory=lambda: ["add_embed_info"])
    log_level: Literal["debug", "info", "warn", "error"] = "info"
