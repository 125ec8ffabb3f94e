"""Component IR, errors and validation."""

from .components import (
    ButtonVariant,
    ButtonSize,
    TextStyle,
    TextTag,
    InputType,
    FlexDirection,
    FlexAlign,
    FlexJustify,
    AnimationType,
    Animation,
    Spacing,
    FlexLayout,
    GridLayout,
    StackLayout,
    ComponentBase,
    ButtonComponent,
    TextComponent,
    InputComponent,
    SelectComponent,
    ImageComponent,
    ContainerComponent,
    CardComponent,
    CustomComponent,
    CanvasComponent,
    dump_components,
    load_components,
    load_component,
)
from .errors import (
    ValidationError,
    EmptyName,
    InvalidName,
    EmptyTemplate,
    InvalidTemplate,
    InvalidPropertyValue,
    DuplicateId,
    ExportError,
)
from .validation import ComponentNameValidator, HtmlTemplateValidator, validate, validate_tree
from . import factory

__all__ = [
    # Enums
    "ButtonVariant",
    "ButtonSize",
    "TextStyle",
    "TextTag",
    "InputType",
    "FlexDirection",
    "FlexAlign",
    "FlexJustify",
    "AnimationType",
    # Value objects
    "Animation",
    "Spacing",
    "FlexLayout",
    "GridLayout",
    "StackLayout",
    # Components
    "ComponentBase",
    "ButtonComponent",
    "TextComponent",
    "InputComponent",
    "SelectComponent",
    "ImageComponent",
    "ContainerComponent",
    "CardComponent",
    "CustomComponent",
    "CanvasComponent",
    "dump_components",
    "load_components",
    "load_component",
    # Errors
    "ValidationError",
    "EmptyName",
    "InvalidName",
    "EmptyTemplate",
    "InvalidTemplate",
    "InvalidPropertyValue",
    "DuplicateId",
    "ExportError",
    # Validation
    "ComponentNameValidator",
    "HtmlTemplateValidator",
    "validate",
    "validate_tree",
    "factory",
]
