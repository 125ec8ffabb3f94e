"""
Export service.

Maps target names to generators and caches generated output. Generators
are pure, so the cache key is just the target plus the serialized tree.
"""

import time

from returns.result import Result, Success, Failure

from ..core import LRUCache, Settings, get_logger, get_settings, safe_json_dumps
from ..domain.components import ComponentBase, dump_components
from ..domain.errors import ExportError
from .base import CodeGenerator, MarkupGenerator
from .css import CssGenerator
from .data import JsonGenerator, JsonSchemaGenerator, TypeScriptGenerator
from .frameworks import ReactGenerator, SvelteGenerator, VueGenerator
from .html import HtmlGenerator, TailwindHtmlGenerator
from .leptos import ExportPreset, LeptosGenerator
from .markdown import MarkdownGenerator

logger = get_logger(__name__)


GENERATORS: dict[str, type[CodeGenerator]] = {
    LeptosGenerator.name: LeptosGenerator,
    HtmlGenerator.name: HtmlGenerator,
    TailwindHtmlGenerator.name: TailwindHtmlGenerator,
    ReactGenerator.name: ReactGenerator,
    VueGenerator.name: VueGenerator,
    SvelteGenerator.name: SvelteGenerator,
    JsonGenerator.name: JsonGenerator,
    JsonSchemaGenerator.name: JsonSchemaGenerator,
    TypeScriptGenerator.name: TypeScriptGenerator,
    MarkdownGenerator.name: MarkdownGenerator,
    CssGenerator.name: CssGenerator,
}


def available_targets() -> list[str]:
    """Registered target names, in registration order."""
    return list(GENERATORS)


def create_generator(target: str, settings: Settings | None = None) -> CodeGenerator:
    """
    Instantiate the generator for a target.

    Args:
        target: Registered target name
        settings: Source of preset and indentation options

    Raises:
        ExportError: Unknown target or invalid preset
    """
    generator_cls = GENERATORS.get(target)
    if generator_cls is None:
        raise ExportError(
            f"Unknown export target '{target}' (available: {', '.join(GENERATORS)})", target=target
        )

    settings = settings or get_settings()
    options: dict[str, object] = {}
    if issubclass(generator_cls, MarkupGenerator) and settings.indent_width:
        options["indent_width"] = settings.indent_width
    if generator_cls is LeptosGenerator:
        try:
            options["preset"] = ExportPreset(settings.export_preset)
        except ValueError as e:
            raise ExportError(f"Unknown export preset '{settings.export_preset}'", target=target) from e
    return generator_cls(**options)


class ExportService:
    """
    Generates code for any registered target.

    Results are cached per (target, tree) when caching is enabled; the
    cache is bounded by ``Settings.cache_size``.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._cache: LRUCache[str] | None = (
            LRUCache(max_size=self.settings.cache_size) if self.settings.enable_cache else None
        )
        logger.info(
            "export_service_init",
            targets=len(GENERATORS),
            cache=self.settings.enable_cache,
        )

    def export(self, components: list[ComponentBase], target: str) -> Result[str, ExportError]:
        """Generate the artifact for ``target``; ``Failure`` on any error."""
        try:
            generator = create_generator(target, self.settings)
        except ExportError as e:
            logger.warning("export_rejected", target=target, error=str(e))
            return Failure(e)

        key: tuple[str, ...] | None = None
        if self._cache is not None:
            key = (target, safe_json_dumps(dump_components(components)))
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug("export_cache_hit", target=target)
                return Success(cached)

        start = time.perf_counter()
        result = generator.generate(components)
        elapsed_ms = (time.perf_counter() - start) * 1000

        if isinstance(result, Failure):
            logger.error("export_failed", target=target, error=str(result.failure()))
            return result

        code = result.unwrap()
        if key is not None:
            self._cache.set(key, code)
        logger.info(
            "export_complete",
            target=target,
            components=len(components),
            chars=len(code),
            duration_ms=round(elapsed_ms, 2),
        )
        return Success(code)

    def file_extension(self, target: str) -> Result[str, ExportError]:
        generator_cls = GENERATORS.get(target)
        if generator_cls is None:
            return Failure(ExportError(f"Unknown export target '{target}'", target=target))
        return Success(generator_cls.extension)

    def targets(self) -> list[str]:
        return available_targets()

    @property
    def cache_stats(self) -> dict[str, object] | None:
        return self._cache.stats.to_dict() if self._cache is not None else None

    def clear_cache(self) -> None:
        if self._cache is not None:
            self._cache.clear()


__all__ = ["GENERATORS", "available_targets", "create_generator", "ExportService"]
