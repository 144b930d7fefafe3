"""
Configuration module for assetfs.

Supports loading from YAML/JSON files with environment variable overrides.
Default values are loaded from defaults.yaml for maintainability.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

# Path to the default configuration file
_DEFAULTS_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

# Cache for default values
_defaults_cache: dict[str, Any] | None = None


def _load_defaults() -> dict[str, Any]:
    """Load default configuration values from defaults.yaml."""
    global _defaults_cache

    if _defaults_cache is not None:
        return _defaults_cache

    if not _DEFAULTS_CONFIG_PATH.exists():
        logger.warning(f"Defaults config not found: {_DEFAULTS_CONFIG_PATH}")
        _defaults_cache = {}
        return _defaults_cache

    try:
        content = _DEFAULTS_CONFIG_PATH.read_text(encoding="utf-8")
        _defaults_cache = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse defaults config: {e}")
        _defaults_cache = {}

    return _defaults_cache


def _get_default(section: str, key: str, fallback: Any = None) -> Any:
    """Get a default value from the defaults config."""
    defaults = _load_defaults()
    section_defaults = defaults.get(section) or {}
    return section_defaults.get(key, fallback)


@dataclass
class RegistryConfig:
    """Configuration for the extension registry."""

    # Empty means the bundled categories.yaml
    categories_file: str = field(
        default_factory=lambda: _get_default("registry", "categories_file", "")
    )


@dataclass
class ScannerConfig:
    """Configuration for directory listings."""

    ignore_patterns: list[str] = field(
        default_factory=lambda: list(_get_default("scanner", "ignore_patterns", []) or [])
    )


@dataclass
class IncludesConfig:
    """Configuration for include resolution."""

    directive: str = field(
        default_factory=lambda: _get_default("includes", "directive", '#include "')
    )
    terminator: str = field(default_factory=lambda: _get_default("includes", "terminator", '"'))
    encoding: str = field(default_factory=lambda: _get_default("includes", "encoding", "utf-8"))


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = field(default_factory=lambda: _get_default("logging", "level", "WARNING"))
    format: str = field(
        default_factory=lambda: _get_default("logging", "format", "%(message)s")
    )


@dataclass
class AssetFSConfig:
    """Main configuration class for assetfs."""

    registry: RegistryConfig = field(default_factory=RegistryConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    includes: IncludesConfig = field(default_factory=IncludesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: Path | str) -> "AssetFSConfig":
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Path to the configuration file (.yaml, .yml, or .json)

        Returns:
            AssetFSConfig instance with loaded values

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValueError: If the file format is unsupported
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        content = path.read_text(encoding="utf-8")

        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content) or {}
        elif path.suffix == ".json":
            data = json.loads(content) if content.strip() else {}
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "AssetFSConfig":
        """Create AssetFSConfig from a dictionary."""
        config = cls()

        try:
            if "registry" in data:
                config.registry = RegistryConfig(**data["registry"])
            if "scanner" in data:
                config.scanner = ScannerConfig(**data["scanner"])
            if "includes" in data:
                config.includes = IncludesConfig(**data["includes"])
            if "logging" in data:
                config.logging = LoggingConfig(**data["logging"])
        except TypeError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

        return config

    def apply_env_overrides(self) -> "AssetFSConfig":
        """
        Apply environment variable overrides to the configuration.

        Environment variables follow the pattern: ASSETFS_<SECTION>_<KEY>
        Examples:
            - ASSETFS_REGISTRY_CATEGORIES_FILE
            - ASSETFS_SCANNER_IGNORE_PATTERNS (comma-separated)
            - ASSETFS_LOGGING_LEVEL

        Returns:
            Self with environment overrides applied
        """
        env_mappings = {
            "ASSETFS_REGISTRY_CATEGORIES_FILE": ("registry", "categories_file", str),
            "ASSETFS_SCANNER_IGNORE_PATTERNS": ("scanner", "ignore_patterns", _parse_list),
            "ASSETFS_INCLUDES_DIRECTIVE": ("includes", "directive", str),
            "ASSETFS_INCLUDES_TERMINATOR": ("includes", "terminator", str),
            "ASSETFS_INCLUDES_ENCODING": ("includes", "encoding", str),
            "ASSETFS_LOGGING_LEVEL": ("logging", "level", str),
            "ASSETFS_LOGGING_FORMAT": ("logging", "format", str),
        }

        for env_var, (section, key, converter) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                section_obj = getattr(self, section)
                setattr(section_obj, key, converter(value))

        return self

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Serialize configuration to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def to_json(self) -> str:
        """Serialize configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: Path | str) -> None:
        """
        Save configuration to a file.

        Args:
            path: Path to save the configuration (.yaml, .yml, or .json)

        Raises:
            ValueError: If the file format is unsupported
        """
        path = Path(path)

        if path.suffix in (".yaml", ".yml"):
            content = self.to_yaml()
        elif path.suffix == ".json":
            content = self.to_json()
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def _parse_list(value: str) -> list[str]:
    """Parse a comma-separated string into a list, dropping blanks."""
    return [item.strip() for item in value.split(",") if item.strip()]


def load_config(config_path: Optional[Path | str] = None, apply_env: bool = True) -> AssetFSConfig:
    """
    Load configuration with optional environment variable overrides.

    Args:
        config_path: Optional path to config file. If None, uses defaults.
        apply_env: Whether to apply environment variable overrides.

    Returns:
        AssetFSConfig instance
    """
    if config_path:
        config = AssetFSConfig.from_file(config_path)
    else:
        config = AssetFSConfig()

    if apply_env:
        config.apply_env_overrides()

    return config
