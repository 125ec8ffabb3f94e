"""Documentation outline target."""

from ..domain.components import (
    ButtonComponent,
    CardComponent,
    ComponentBase,
    ContainerComponent,
    CustomComponent,
    FlexLayout,
    GridLayout,
    ImageComponent,
    InputComponent,
    Layout,
    SelectComponent,
    StackLayout,
    TextComponent,
)
from .base import TEMPLATE_NOT_FOUND, CodeGenerator, EventKind, custom_template, enum_label, tree_events


def describe_layout(layout: Layout) -> str:
    match layout:
        case FlexLayout():
            wrap = ", wrap" if layout.wrap else ""
            return f"Flex ({layout.direction.value}{wrap})"
        case GridLayout():
            return f"Grid ({layout.columns}x{layout.rows})"
        case StackLayout():
            return "Stack"


def _entry(node: ComponentBase) -> tuple[str, list[str]]:
    """Bullet headline and detail lines for one node."""
    match node:
        case ButtonComponent():
            return f"**Button**: {node.label}", [
                f"Variant: {enum_label(node.variant)}",
                f"Size: {enum_label(node.size)}",
                f"Disabled: {str(node.disabled).lower()}",
            ]
        case TextComponent():
            return f"**Text**: {node.content}", [
                f"Style: {enum_label(node.style)}",
                f"Tag: {enum_label(node.tag)}",
            ]
        case InputComponent():
            return "**Input**", [
                f"Type: {enum_label(node.input_type)}",
                f"Placeholder: {node.placeholder}",
                f"Required: {str(node.required).lower()}",
            ]
        case SelectComponent():
            return "**Select**", [
                f"Placeholder: {node.placeholder}",
                f"Options: {node.options}",
                f"Disabled: {str(node.disabled).lower()}",
            ]
        case ContainerComponent():
            return "**Container**", [
                f"Layout: {describe_layout(node.layout)}",
                f"Children: {len(node.children)}",
            ]
        case ImageComponent():
            return "**Image**", [f"Src: {node.src}", f"Alt: {node.alt}"]
        case CardComponent():
            return "**Card**", [f"Padding: {node.padding}", f"Children: {len(node.children)}"]
        case CustomComponent():
            template = custom_template(node)
            shown = f"`{' '.join(template.split())}`" if template else TEMPLATE_NOT_FOUND
            return f"**Custom Component**: {node.name}", [f"Template: {shown}"]
    raise TypeError(f"Unsupported component: {node.component_type}")


class MarkdownGenerator(CodeGenerator):
    """
    Nested bullet outline, one section per root.

    Each nesting level indents by two spaces; node details sit one level
    below their headline.
    """

    name = "markdown"
    extension = "md"

    def render(self, components: list[ComponentBase]) -> str:
        output = ["# Generated Layout Documentation\n\n"]
        section = 0
        for event in tree_events(components):
            if event.kind == EventKind.EXIT:
                if event.depth == 0:
                    output.append("\n")
                continue

            if event.depth == 0:
                section += 1
                output.append(f"## Component {section}\n\n")

            indent = "  " * event.depth
            headline, details = _entry(event.node)
            output.append(f"{indent}- {headline}\n")
            output.extend(f"{indent}  - {detail}\n" for detail in details)

            if event.kind == EventKind.LEAF and event.depth == 0:
                output.append("\n")
        return "".join(output)


__all__ = ["MarkdownGenerator", "describe_layout"]
