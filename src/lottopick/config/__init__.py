"""Config loading and schema."""

from .loader import ConfigLoadError, load_config
from .schema import DEFAULT_STORAGE_KEY, GeneratorConfig

__all__ = ["ConfigLoadError", "DEFAULT_STORAGE_KEY", "GeneratorConfig", "load_config"]
