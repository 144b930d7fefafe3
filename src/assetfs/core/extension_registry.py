"""
Extension registry for classifying files into asset categories.
"""

import logging
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

import yaml

from .text_utils import extension_of, split_name

logger = logging.getLogger(__name__)

# Default path to the bundled extension tables
_DEFAULT_CATEGORIES_CONFIG = Path(__file__).parent / "categories.yaml"


class Category(str, Enum):
    """Foreign (import-source) asset categories."""

    IMAGE = "image"
    AUDIO = "audio"
    MODEL = "model"
    SHADER = "shader"
    SCRIPT = "script"
    FONT = "font"


class NativeCategory(str, Enum):
    """Categories of the engine's own serialized asset formats."""

    TEXTURE = "texture"
    MODEL = "model"
    MATERIAL = "material"
    MESH = "mesh"
    WORLD = "world"
    AUDIO = "audio"
    SHADER = "shader"
    PREFAB = "prefab"
    FONT = "font"


class ExtensionRegistry:
    """
    Immutable table of recognized extensions per category.

    Each category maps to an ordered, duplicate-free tuple of lowercase
    extensions. Each native category maps to exactly one extension.
    Instances never change after construction; use with_extensions() to
    derive an extended registry.

    Example:
        >>> registry = ExtensionRegistry()
        >>> registry.is_in_category("music/theme.OGG", Category.AUDIO)
        True
        >>> registry.native_extension_for(NativeCategory.TEXTURE)
        '.texture'
    """

    def __init__(
        self,
        supported: Mapping[Category, Iterable[str]] | None = None,
        native: Mapping[NativeCategory, str] | None = None,
        load_defaults: bool = True,
    ):
        """
        Initialize the registry.

        Args:
            supported: Extra supported extensions per category, merged after
                      the defaults (if loaded).
            native: Native extensions overriding the defaults (if loaded).
            load_defaults: If True, start from the bundled categories.yaml.
        """
        supported_tables: dict[Category, list[str]] = {category: [] for category in Category}
        native_table: dict[NativeCategory, str] = {}

        if load_defaults:
            _load_tables(_DEFAULT_CATEGORIES_CONFIG, supported_tables, native_table)

        for category, extensions in (supported or {}).items():
            for ext in extensions:
                _add_extension(supported_tables, Category(category), ext)
        for category, ext in (native or {}).items():
            native_table[NativeCategory(category)] = str(ext)

        self._supported: Mapping[Category, tuple[str, ...]] = MappingProxyType(
            {category: tuple(exts) for category, exts in supported_tables.items()}
        )
        self._native: Mapping[NativeCategory, str] = MappingProxyType(dict(native_table))

    @classmethod
    def from_yaml(cls, config_path: Path | str) -> "ExtensionRegistry":
        """
        Create a registry from a YAML configuration file.

        Args:
            config_path: Path to the YAML file

        Returns:
            ExtensionRegistry holding only the tables from that file

        Raises:
            ValueError: If the file is not valid YAML or has the wrong shape
        """
        supported: dict[Category, list[str]] = {category: [] for category in Category}
        native: dict[NativeCategory, str] = {}
        _load_tables(Path(config_path), supported, native)
        return cls(supported=supported, native=native, load_defaults=False)

    def with_extensions(self, category: Category, extensions: Iterable[str]) -> "ExtensionRegistry":
        """
        Derive a registry with additional supported extensions.

        Args:
            category: Category to extend
            extensions: Extensions including the dot (e.g., ['.ktx'])

        Returns:
            A new registry; this one is left unchanged
        """
        supported = {cat: list(exts) for cat, exts in self._supported.items()}
        supported[Category(category)].extend(extensions)
        return ExtensionRegistry(supported=supported, native=self._native, load_defaults=False)

    def matches_extension(self, extension: str, category: Category) -> bool:
        """
        Check an already-extracted extension against a category.

        Only the registered lowercase spelling and its all-uppercase form
        match; mixed case such as '.Png' does not.
        """
        if not extension:
            return False
        for registered in self._supported.get(category, ()):
            if extension == registered or extension == registered.upper():
                return True
        return False

    def is_in_category(self, path: str, category: Category) -> bool:
        """
        Check whether a path's extension belongs to a category.

        Args:
            path: File path or bare file name
            category: Category to test

        Returns:
            True if the extension is registered for the category
        """
        return self.matches_extension(extension_of(split_name(str(path))), category)

    def categories_for(self, path: str) -> list[Category]:
        """Every category whose extension set matches the path, in enum order."""
        return [category for category in Category if self.is_in_category(path, category)]

    def native_extension_for(self, category: NativeCategory) -> str:
        """
        Get the canonical extension of a native category.

        Returns:
            The extension, or '' if the category has none registered
        """
        return self._native.get(NativeCategory(category), "")

    def supported_extensions(self, category: Category) -> tuple[str, ...]:
        """Registered extensions for a category, in registration order."""
        return self._supported.get(Category(category), ())

    def all_supported_extensions(self) -> set[str]:
        """Every registered supported extension across all categories."""
        return {ext for exts in self._supported.values() for ext in exts}

    def native_extensions(self) -> Mapping[NativeCategory, str]:
        return self._native


def _add_extension(tables: dict[Category, list[str]], category: Category, extension: str) -> None:
    """Append an extension to a category unless it is already present."""
    ext_lower = str(extension).strip().lower()
    if not ext_lower.startswith("."):
        ext_lower = f".{ext_lower}"
    if ext_lower in tables[category]:
        logger.debug(f"Duplicate extension {ext_lower} for {category.value}, ignoring")
        return
    tables[category].append(ext_lower)


def _load_tables(
    config_path: Path,
    supported: dict[Category, list[str]],
    native: dict[NativeCategory, str],
) -> None:
    """
    Load extension tables from a YAML file.

    Expected format:
        supported:
          image:
            - .png
        native:
          texture: .texture
    """
    if not config_path.exists():
        logger.warning(f"Categories config not found: {config_path}, using empty registry")
        return

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse categories config: {e}")
        raise ValueError(f"Invalid YAML in categories config: {e}") from e

    if data is None:
        return

    if not isinstance(data, dict):
        raise ValueError(f"Invalid categories config format: expected dict, got {type(data)}")

    for name, extensions in (data.get("supported") or {}).items():
        try:
            category = Category(str(name))
        except ValueError:
            logger.warning(f"Unknown category in {config_path}: {name}")
            continue
        if not isinstance(extensions, list):
            logger.warning(f"Invalid extensions for {name}: expected list, got {type(extensions)}")
            continue
        for ext in extensions:
            _add_extension(supported, category, str(ext))

    for name, ext in (data.get("native") or {}).items():
        try:
            native[NativeCategory(str(name))] = str(ext)
        except ValueError:
            logger.warning(f"Unknown native category in {config_path}: {name}")


# Global default registry instance
_default_registry: ExtensionRegistry | None = None


def get_default_registry() -> ExtensionRegistry:
    """Get the process-wide default registry, building it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ExtensionRegistry()
    return _default_registry
