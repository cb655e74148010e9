from .loader import ConfigError, load_config
from .models import ExportConfig, TagFilterConfig
from .registry import POSTPROCESSOR_NAMES, build_pipeline, build_postprocessors

__all__ = [
    "ConfigError",
    "ExportConfig",
    "POSTPROCESSOR_NAMES",
    "TagFilterConfig",
    "build_pipeline",
    "build_postprocessors",
    "load_config",
]
