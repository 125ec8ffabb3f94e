"""Code generators and the export service."""

from .base import TEMPLATE_NOT_FOUND, CodeGenerator, MarkupGenerator, tree_events
from .css import CssGenerator
from .data import JsonGenerator, JsonSchemaGenerator, TypeScriptGenerator
from .frameworks import ReactGenerator, SvelteGenerator, VueGenerator
from .html import HtmlGenerator, TailwindHtmlGenerator
from .leptos import ExportPreset, LeptosGenerator
from .markdown import MarkdownGenerator
from .service import GENERATORS, ExportService, available_targets, create_generator

__all__ = [
    "TEMPLATE_NOT_FOUND",
    "CodeGenerator",
    "MarkupGenerator",
    "tree_events",
    "ExportPreset",
    "LeptosGenerator",
    "HtmlGenerator",
    "TailwindHtmlGenerator",
    "ReactGenerator",
    "VueGenerator",
    "SvelteGenerator",
    "JsonGenerator",
    "JsonSchemaGenerator",
    "TypeScriptGenerator",
    "MarkdownGenerator",
    "CssGenerator",
    "GENERATORS",
    "ExportService",
    "available_targets",
    "create_generator",
]
