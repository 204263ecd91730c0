"""
Configuration data models for the installer utilities.

This module defines the structure of the per-project configuration: default
search options for ``find`` and default execution options for ``log_exec``.
"""

from pathlib import Path
from typing import Dict, List, Any
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .options import SearchOptions, ExecOptions


KNOWN_SECTIONS = ('find', 'exec')


class UtilsConfig(BaseModel):
    """
    Main configuration class for the installer utilities.

    Attributes:
        find: Default options for directory/file searches
        exec: Default options for program execution
    """

    model_config = ConfigDict(extra='ignore')

    find: SearchOptions = Field(default_factory=SearchOptions, description="Default search options")
    exec: ExecOptions = Field(default_factory=ExecOptions, description="Default execution options")

    def validate_configuration(self) -> List[str]:
        """
        Check the configuration for settings that are valid but probably unintended.

        Returns:
            List of warning messages
        """
        warnings = []

        if self.find.cache_file and not Path(self.find.cache_file).exists():
            warnings.append(f"Cache file does not exist yet: {self.find.cache_file}")

        if self.exec.cwd and not Path(self.exec.cwd).is_dir():
            warnings.append(f"Working directory does not exist: {self.exec.cwd}")

        if self.exec.run_in_background and self.exec.retrieve_std_streams:
            warnings.append("retrieve_std_streams has no effect when run_in_background is enabled")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a YAML-friendly dictionary."""
        return {
            'find': self.find.to_dict(),
            'exec': self.exec.model_dump(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UtilsConfig':
        """Create a UtilsConfig instance from a dictionary."""
        return cls.model_validate(data)


def validate_config_dict(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a configuration dictionary using Pydantic.

    Args:
        config_data: Dictionary containing configuration data

    Returns:
        Validated configuration dictionary with ``None`` sections replaced by empty ones

    Raises:
        ValueError: If configuration is invalid
    """
    validated_config = dict(config_data)
    for section in KNOWN_SECTIONS:
        value = validated_config.get(section)
        if value is None:
            validated_config[section] = {}
        elif not isinstance(value, dict):
            raise ValueError(f"Section '{section}' must be a mapping, got {type(value).__name__}")

    try:
        UtilsConfig.model_validate(validated_config)
    except ValidationError as e:
        raise ValueError(str(e)) from e

    return validated_config
