"""
Code generator base and shared mapping tables.

Generators fold a component forest into text. They are pure: the output
depends only on the forest and the generator's own options. Trees are
walked with an explicit stack (``tree_events``), so nesting depth is not
bounded by the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum
from typing import ClassVar, NamedTuple

from returns.result import Result, Success, Failure

from ..domain.components import (
    ButtonSize,
    ButtonVariant,
    CardComponent,
    ComponentBase,
    ContainerComponent,
    FlexAlign,
    FlexJustify,
    FlexLayout,
    GridLayout,
    StackLayout,
)
from ..domain.errors import ExportError


TEMPLATE_NOT_FOUND = "template not found"


# ============================================================================
# Mapping tables
# ============================================================================

BUTTON_VARIANT_CLASS: dict[ButtonVariant, str] = {
    ButtonVariant.PRIMARY: "btn-primary",
    ButtonVariant.SECONDARY: "btn-secondary",
    ButtonVariant.OUTLINE: "btn-outline",
    ButtonVariant.GHOST: "btn-ghost",
}

BUTTON_SIZE_CLASS: dict[ButtonSize, str] = {
    ButtonSize.SMALL: "btn-sm",
    ButtonSize.MEDIUM: "btn-md",
    ButtonSize.LARGE: "btn-lg",
}

FLEX_ALIGN_CSS: dict[FlexAlign, str] = {
    FlexAlign.START: "flex-start",
    FlexAlign.CENTER: "center",
    FlexAlign.END: "flex-end",
    FlexAlign.STRETCH: "stretch",
    FlexAlign.BASELINE: "baseline",
}

FLEX_JUSTIFY_CSS: dict[FlexJustify, str] = {
    FlexJustify.START: "flex-start",
    FlexJustify.CENTER: "center",
    FlexJustify.END: "flex-end",
    FlexJustify.BETWEEN: "space-between",
    FlexJustify.AROUND: "space-around",
    FlexJustify.EVENLY: "space-evenly",
}

CARD_SHADOW_CSS = "box-shadow: 0 4px 6px -1px rgb(0 0 0 / 0.1);"
CARD_BORDER_CSS = "border: 1px solid #e5e7eb;"


# ============================================================================
# Layout CSS
# ============================================================================


def container_declarations(node: ContainerComponent) -> list[str]:
    """CSS declarations for a container's layout, gap and padding."""
    match node.layout:
        case FlexLayout():
            declarations = ["display: flex;", f"flex-direction: {node.layout.direction.value};"]
            if node.layout.wrap:
                declarations.append("flex-wrap: wrap;")
            declarations.append(f"align-items: {FLEX_ALIGN_CSS[node.layout.align_items]};")
            declarations.append(f"justify-content: {FLEX_JUSTIFY_CSS[node.layout.justify_content]};")
        case GridLayout():
            declarations = [
                "display: grid;",
                f"grid-template-columns: repeat({node.layout.columns}, 1fr);",
                f"grid-template-rows: repeat({node.layout.rows}, auto);",
            ]
        case StackLayout():
            declarations = ["display: flex;", "flex-direction: column;"]
    declarations.append(f"gap: {node.gap}px;")
    declarations.append(f"padding: {node.padding.css()};")
    return declarations


def card_declarations(node: CardComponent) -> list[str]:
    declarations = [f"padding: {node.padding}px;", f"border-radius: {node.border_radius}px;"]
    if node.shadow:
        declarations.append(CARD_SHADOW_CSS)
    if node.border:
        declarations.append(CARD_BORDER_CSS)
    return declarations


def animation_css(node: ComponentBase) -> str:
    return node.animation.to_css() if node.animation else ""


# ============================================================================
# Escaping
# ============================================================================


def escape_attr(value: str) -> str:
    """Escape a value placed inside a double-quoted markup attribute."""
    return value.replace("&", "&amp;").replace('"', "&quot;")


def escape_string_literal(value: str) -> str:
    """Escape a value placed inside a double-quoted string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def escape_template_literal(value: str) -> str:
    """Escape raw markup placed inside a JavaScript template literal."""
    return value.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def enum_label(value: Enum) -> str:
    """Human label for an enum member (``HEADING1`` -> ``Heading1``)."""
    return value.name.replace("_", " ").title().replace(" ", "")


def custom_template(node: ComponentBase) -> str | None:
    """The custom node's markup, or None when absent or blank."""
    template = getattr(node, "template", None)
    return template if template and template.strip() else None


# ============================================================================
# Traversal
# ============================================================================


class EventKind(str, Enum):
    LEAF = "leaf"
    ENTER = "enter"
    EXIT = "exit"


class TreeEvent(NamedTuple):
    kind: EventKind
    node: ComponentBase
    depth: int


def tree_events(components: list[ComponentBase], depth: int = 0) -> Iterator[TreeEvent]:
    """
    Pre-order walk as a flat event stream.

    Container-like nodes produce ENTER, then their children's events, then
    EXIT; every other node produces a single LEAF.
    """
    stack: list[tuple[ComponentBase, int, bool]] = [
        (node, depth, True) for node in reversed(components)
    ]
    while stack:
        node, level, entering = stack.pop()
        if not entering:
            yield TreeEvent(EventKind.EXIT, node, level)
            continue

        children = node.children_of()
        if children is None:
            yield TreeEvent(EventKind.LEAF, node, level)
            continue

        yield TreeEvent(EventKind.ENTER, node, level)
        stack.append((node, level, False))
        stack.extend((child, level + 1, True) for child in reversed(children))


# ============================================================================
# Generator base
# ============================================================================


class CodeGenerator(ABC):
    """
    Base class for export targets.

    Subclasses implement ``render``; ``generate`` turns serializer-level
    failures into ``Failure(ExportError)``.
    """

    name: ClassVar[str]
    extension: ClassVar[str]

    def generate(self, components: list[ComponentBase]) -> Result[str, ExportError]:
        try:
            return Success(self.render(components))
        except (TypeError, ValueError) as e:
            return Failure(ExportError(f"Failed to generate {self.name}: {e}", target=self.name))

    def file_extension(self) -> str:
        return self.extension

    @abstractmethod
    def render(self, components: list[ComponentBase]) -> str:
        """Produce the artifact text."""
        ...


class MarkupGenerator(CodeGenerator):
    """
    Generator for tag-based targets.

    Subclasses provide the document skeleton and the lines for each node,
    without leading indentation; this class drives the walk and indents
    every line by nesting depth.
    """

    base_depth: ClassVar[int] = 0

    def __init__(self, indent_width: int = 4):
        self.indent_width = indent_width

    @property
    def unit(self) -> str:
        """One level of indentation, for nested lines within a fragment."""
        return " " * self.indent_width

    def pad(self, depth: int) -> str:
        return self.unit * (depth + self.base_depth)

    def render(self, components: list[ComponentBase]) -> str:
        output = [self.header()]
        for event in tree_events(components):
            match event.kind:
                case EventKind.LEAF:
                    fragment = self.leaf(event.node)
                case EventKind.ENTER:
                    fragment = self.open(event.node)
                case EventKind.EXIT:
                    fragment = self.close(event.node)
            pad = self.pad(event.depth)
            output.extend(f"{pad}{line}\n" for line in fragment)
        output.append(self.footer())
        return "".join(output)

    @abstractmethod
    def header(self) -> str: ...

    @abstractmethod
    def footer(self) -> str: ...

    @abstractmethod
    def leaf(self, node: ComponentBase) -> list[str]:
        """Lines for a non-container node."""
        ...

    @abstractmethod
    def open(self, node: ComponentBase) -> list[str]: ...

    @abstractmethod
    def close(self, node: ComponentBase) -> list[str]: ...


__all__ = [
    "TEMPLATE_NOT_FOUND",
    "BUTTON_VARIANT_CLASS",
    "BUTTON_SIZE_CLASS",
    "FLEX_ALIGN_CSS",
    "FLEX_JUSTIFY_CSS",
    "CARD_SHADOW_CSS",
    "CARD_BORDER_CSS",
    "container_declarations",
    "card_declarations",
    "animation_css",
    "escape_attr",
    "escape_string_literal",
    "escape_template_literal",
    "enum_label",
    "custom_template",
    "EventKind",
    "TreeEvent",
    "tree_events",
    "CodeGenerator",
    "MarkupGenerator",
]
