"""
Configuration Loader - YAML Loading with Validation.

A config file holds the sections of PrimitivesConfig (parsing, logging).
Profiles are partial overrides stored as profiles/<name>.yaml next to the
config file and deep-merged over it, so a deployment only states what
differs (e.g. day-first dates).

Everything is validated on load: an unknown logging level, a date format
without day/month/year directives or a time suffix without hour/minute
fails here instead of at the first parse.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from validated_primitives.config.models import PrimitivesConfig

logger = logging.getLogger(__name__)

PROFILES_DIR = "profiles"


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> PrimitivesConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name, looked up in the profiles
                directory beside the config file

        Returns:
            Validated PrimitivesConfig object

        Raises:
            FileNotFoundError: If config or profile file doesn't exist
            ValueError: If a file does not hold a mapping
            pydantic.ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)

        if profile:
            profile_dict = self._load_yaml(self._profile_path(path, profile))
            config_dict = self._merge_configs(config_dict, profile_dict)

        config = PrimitivesConfig.model_validate(config_dict)
        logger.debug(
            f"Loaded config {path} (profile={profile or 'none'}, "
            f"day_first={config.parsing.day_first}, "
            f"logging={config.logging.level})"
        )
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> PrimitivesConfig:
        """Load configuration from an already parsed dictionary."""
        return PrimitivesConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _profile_path(self, config_path: Path, profile: str) -> Path:
        profile_path = config_path.parent / PROFILES_DIR / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile} ({profile_path})")
        return profile_path

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Config file {path} must contain a mapping, "
                f"got {type(data).__name__}"
            )
        return data

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Deep merge overlay into base config.

        Nested sections merge key by key; lists (format lists) are replaced
        as a whole, so a profile can reorder or shorten them.
        """
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> PrimitivesConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated PrimitivesConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path, profile)
