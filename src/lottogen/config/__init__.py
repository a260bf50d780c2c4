"""Config loading and schema."""

from .loader import ConfigLoadError, load_config
from .log import configure_logging
from .schema import GeneratorConfig

__all__ = ["ConfigLoadError", "GeneratorConfig", "configure_logging", "load_config"]
