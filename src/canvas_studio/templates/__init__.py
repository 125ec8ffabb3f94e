"""Built-in layout templates."""

from .library import Template, TemplateCategory, TemplateLibrary

__all__ = ["Template", "TemplateCategory", "TemplateLibrary"]
