"""
Category predicates over file paths.
"""

from typing import Iterable

from .extension_registry import Category, ExtensionRegistry, NativeCategory
from .path_resolver import PathResolver


class Classifier:
    """
    Answers "is this a supported / engine file of category X".

    Supported-format checks accept the registered lowercase extension and
    its all-uppercase form. Engine-file checks compare against the single
    native extension exactly.
    """

    def __init__(self, resolver: PathResolver | None = None):
        self._resolver = resolver or PathResolver()

    @property
    def registry(self) -> ExtensionRegistry:
        return self._resolver.registry

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    def is_supported(self, path: str, category: Category) -> bool:
        return self.registry.matches_extension(self._resolver.extension(path), category)

    def categorize(self, path: str) -> Category | None:
        """First supported category matching the path, in enum order."""
        ext = self._resolver.extension(path)
        for category in Category:
            if self.registry.matches_extension(ext, category):
                return category
        return None

    def is_supported_image(self, path: str) -> bool:
        return self.is_supported(path, Category.IMAGE)

    def is_supported_audio(self, path: str) -> bool:
        return self.is_supported(path, Category.AUDIO)

    def is_supported_model(self, path: str) -> bool:
        return self.is_supported(path, Category.MODEL)

    def is_supported_shader(self, path: str) -> bool:
        return self.is_supported(path, Category.SHADER)

    def is_supported_font(self, path: str) -> bool:
        return self.is_supported(path, Category.FONT)

    def is_engine_script(self, path: str) -> bool:
        # Scripts are consumed as-is, so the supported format is the engine format.
        return self.is_supported(path, Category.SCRIPT)

    def is_engine_file_of(self, path: str, category: NativeCategory) -> bool:
        native = self.registry.native_extension_for(category)
        return bool(native) and self._resolver.extension(path) == native

    def is_engine_prefab(self, path: str) -> bool:
        return self.is_engine_file_of(path, NativeCategory.PREFAB)

    def is_engine_model(self, path: str) -> bool:
        return self.is_engine_file_of(path, NativeCategory.MODEL)

    def is_engine_material(self, path: str) -> bool:
        return self.is_engine_file_of(path, NativeCategory.MATERIAL)

    def is_engine_mesh(self, path: str) -> bool:
        return self.is_engine_file_of(path, NativeCategory.MESH)

    def is_engine_scene(self, path: str) -> bool:
        return self.is_engine_file_of(path, NativeCategory.WORLD)

    def is_engine_texture(self, path: str) -> bool:
        return self.is_engine_file_of(path, NativeCategory.TEXTURE)

    def is_engine_audio(self, path: str) -> bool:
        return self.is_engine_file_of(path, NativeCategory.AUDIO)

    def is_engine_shader(self, path: str) -> bool:
        return self.is_engine_file_of(path, NativeCategory.SHADER)

    def native_category_of(self, path: str) -> NativeCategory | None:
        """Native category whose extension the path carries exactly, if any."""
        ext = self._resolver.extension(path)
        if not ext:
            return None
        for category, native in self.registry.native_extensions().items():
            if ext == native:
                return category
        return None

    def is_any_engine_file(self, path: str) -> bool:
        """True for engine scripts and for any native-format file."""
        ext = self._resolver.extension(path)
        if self.registry.matches_extension(ext, Category.SCRIPT):
            return True
        return bool(ext) and ext in self.registry.native_extensions().values()

    def filter_by_category(self, paths: Iterable[str], category: Category) -> list[str]:
        """Paths supported for the category, in input order, duplicates kept."""
        return [path for path in paths if self.is_supported(path, category)]

    def filter_engine_files(self, paths: Iterable[str], category: NativeCategory) -> list[str]:
        return [path for path in paths if self.is_engine_file_of(path, category)]
