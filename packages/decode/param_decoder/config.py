"""Decoder configuration loaded from YAML."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecoderConfig:
    """
    Tunables for EncodingDetector.

    Defaults reproduce the standard behavior: a 50 character input preview
    in failure messages and escape normalization enabled.
    """
    preview_length: int = 50
    preview_suffix: str = "..."
    unescape: bool = True

    def __post_init__(self):
        if isinstance(self.preview_length, bool) or not isinstance(self.preview_length, int):
            raise ValueError(f"preview_length must be an integer, got {self.preview_length!r}")
        if self.preview_length <= 0:
            raise ValueError(f"preview_length must be positive, got {self.preview_length}")
        if not isinstance(self.preview_suffix, str):
            raise ValueError(f"preview_suffix must be a string, got {self.preview_suffix!r}")
        if not isinstance(self.unescape, bool):
            raise ValueError(f"unescape must be a boolean, got {self.unescape!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DecoderConfig":
        """Create from dictionary, ignoring unknown keys."""
        defaults = cls()
        return cls(
            preview_length=data.get("preview_length", defaults.preview_length),
            preview_suffix=data.get("preview_suffix", defaults.preview_suffix),
            unescape=data.get("unescape", defaults.unescape),
        )


def load_config(path: Optional[Union[str, Path]] = None) -> DecoderConfig:
    """
    Load decoder configuration from a YAML file.

    Falls back to defaults when no path is given, the file does not exist,
    or it cannot be parsed.

    Args:
        path: Path to a YAML mapping with decoder settings

    Returns:
        DecoderConfig

    Raises:
        ValueError: If the file holds a value of the wrong type or range
    """
    if path is None:
        return DecoderConfig()

    config_path = Path(path)
    if not config_path.exists():
        logger.debug(f"No decoder config at {config_path}, using defaults")
        return DecoderConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load decoder config from {config_path}: {e}")
        return DecoderConfig()

    if not isinstance(data, dict):
        logger.warning(f"Decoder config in {config_path} is not a mapping, using defaults")
        return DecoderConfig()

    logger.debug(f"Loaded decoder config from {config_path}")
    return DecoderConfig.from_dict(data)
