"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - PrimitivesConfig: Root configuration object
    - ParsingConfig: Date and number parsing settings
    - LoggingConfig: Level and format handed to configure_logging()

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (profiles/<name>.yaml next to the base file)
    - Passed explicitly; no process-wide config singleton
"""

from validated_primitives.config.loader import ConfigLoader, load_config
from validated_primitives.config.models import (
    LoggingConfig,
    ParsingConfig,
    PrimitivesConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "LoggingConfig",
    "ParsingConfig",
    "PrimitivesConfig",
]
