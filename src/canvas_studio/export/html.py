"""
Plain-markup targets: bare HTML and HTML with Tailwind utility classes.

Boolean attributes are rendered by presence. Attribute values are
entity-escaped; text content is written as-is.
"""

from ..domain.components import (
    ButtonComponent,
    ButtonSize,
    ButtonVariant,
    CardComponent,
    ComponentBase,
    ContainerComponent,
    CustomComponent,
    FlexAlign,
    FlexDirection,
    FlexJustify,
    FlexLayout,
    GridLayout,
    ImageComponent,
    InputComponent,
    SelectComponent,
    StackLayout,
    TextComponent,
    TextTag,
)
from .base import (
    TEMPLATE_NOT_FOUND,
    MarkupGenerator,
    animation_css,
    card_declarations,
    container_declarations,
    custom_template,
    escape_attr,
)


def _flag(name: str, enabled: bool) -> str:
    return f" {name}" if enabled else ""


def _handler(event: str, handler: str | None) -> str:
    return f' on{event}="{escape_attr(handler)}()"' if handler else ""


def _style_attr(*declarations: str) -> str:
    style = " ".join(d for d in declarations if d)
    return f' style="{style}"' if style else ""


def _custom_lines(node: CustomComponent, placeholder_class: str = "custom-placeholder") -> list[str]:
    template = custom_template(node)
    lines = [f"<!-- Custom: {node.name} -->"]
    if template is None:
        lines.append(
            f'<div class="{placeholder_class}" data-component="{escape_attr(node.name)}">'
            f"{TEMPLATE_NOT_FOUND}</div>"
        )
    else:
        lines.extend(template.splitlines())
    return lines


def _select_lines(node: SelectComponent, unit: str, extra: str = "") -> list[str]:
    lines = [f"<select{extra}{_flag('disabled', node.disabled)}{_handler('change', node.on_change)}"
             f"{_style_attr(animation_css(node))}>"]
    if node.placeholder:
        lines.append(f'{unit}<option value="" disabled selected>{node.placeholder}</option>')
    for option in node.option_list():
        lines.append(f'{unit}<option value="{escape_attr(option)}">{option}</option>')
    lines.append("</select>")
    return lines


def _image_line(node: ImageComponent, extra: str = "") -> str:
    size = ""
    if node.width:
        size += f' width="{escape_attr(node.width)}"'
    if node.height:
        size += f' height="{escape_attr(node.height)}"'
    return (
        f'<img src="{escape_attr(node.src)}" alt="{escape_attr(node.alt)}"{size}{extra}'
        f"{_handler('click', node.on_click)}{_style_attr(animation_css(node))} />"
    )


class HtmlGenerator(MarkupGenerator):
    name = "html"
    extension = "html"
    base_depth = 1

    def header(self) -> str:
        return (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            f'{self.unit}<meta charset="UTF-8">\n'
            f"{self.unit}<title>Generated Layout</title>\n"
            "</head>\n"
            "<body>\n"
        )

    def footer(self) -> str:
        return "</body>\n</html>\n"

    def leaf(self, node: ComponentBase) -> list[str]:
        match node:
            case ButtonComponent():
                return [
                    f"<button{_flag('disabled', node.disabled)}{_handler('click', node.on_click)}"
                    f"{_style_attr(animation_css(node))}>{node.label}</button>"
                ]
            case TextComponent():
                tag = node.tag.value
                return [f"<{tag}{_style_attr(animation_css(node))}>{node.content}</{tag}>"]
            case InputComponent():
                return [
                    f'<input type="{node.input_type.value}" placeholder="{escape_attr(node.placeholder)}"'
                    f"{_flag('required', node.required)}{_flag('disabled', node.disabled)}"
                    f"{_handler('change', node.on_change)}{_handler('input', node.on_input)}"
                    f"{_style_attr(animation_css(node))}>"
                ]
            case SelectComponent():
                return _select_lines(node, self.unit)
            case ImageComponent():
                return [_image_line(node)]
            case CustomComponent():
                return _custom_lines(node)
        raise TypeError(f"Unsupported component: {node.component_type}")

    def open(self, node: ComponentBase) -> list[str]:
        match node:
            case ContainerComponent():
                style = _style_attr(*container_declarations(node), animation_css(node))
                return [f"<div{_handler('click', node.on_click)}{style}>"]
            case CardComponent():
                style = _style_attr(*card_declarations(node), animation_css(node))
                return [f"<div{_handler('click', node.on_click)}{style}>"]
        raise TypeError(f"Unsupported container: {node.component_type}")

    def close(self, node: ComponentBase) -> list[str]:
        return ["</div>"]


# ============================================================================
# Tailwind
# ============================================================================

TW_BUTTON_VARIANT: dict[ButtonVariant, str] = {
    ButtonVariant.PRIMARY: "bg-blue-600 hover:bg-blue-700 text-white",
    ButtonVariant.SECONDARY: "bg-gray-200 hover:bg-gray-300 text-gray-800",
    ButtonVariant.OUTLINE: "bg-transparent border-2 border-blue-600 text-blue-600 hover:bg-blue-50",
    ButtonVariant.GHOST: "bg-transparent text-gray-600 hover:bg-gray-100",
}

TW_BUTTON_SIZE: dict[ButtonSize, str] = {
    ButtonSize.SMALL: "px-3 py-1 text-sm",
    ButtonSize.MEDIUM: "px-4 py-2 text-base",
    ButtonSize.LARGE: "px-6 py-3 text-lg",
}

TW_TEXT: dict[TextTag, str] = {
    TextTag.H1: "text-4xl font-bold text-gray-900",
    TextTag.H2: "text-3xl font-semibold text-gray-800",
    TextTag.H3: "text-2xl font-medium text-gray-700",
    TextTag.P: "text-base text-gray-600",
    TextTag.SPAN: "text-base text-gray-600",
}

TW_ALIGN: dict[FlexAlign, str] = {
    FlexAlign.START: "items-start",
    FlexAlign.CENTER: "items-center",
    FlexAlign.END: "items-end",
    FlexAlign.STRETCH: "items-stretch",
    FlexAlign.BASELINE: "items-baseline",
}

TW_JUSTIFY: dict[FlexJustify, str] = {
    FlexJustify.START: "justify-start",
    FlexJustify.CENTER: "justify-center",
    FlexJustify.END: "justify-end",
    FlexJustify.BETWEEN: "justify-between",
    FlexJustify.AROUND: "justify-around",
    FlexJustify.EVENLY: "justify-evenly",
}

TW_INPUT = "w-full px-4 py-2 border border-gray-300 rounded-md focus:ring-2 focus:ring-blue-500 focus:border-transparent"
TW_SELECT = "w-full px-4 py-2 border border-gray-300 rounded-md bg-white"


def _spacing_step(pixels: int, low: int = 0) -> int:
    """Tailwind spacing steps are 4px, capped at 16."""
    return max(low, min(pixels // 4, 16))


class TailwindHtmlGenerator(MarkupGenerator):
    name = "tailwind"
    extension = "html"
    base_depth = 2

    def __init__(self, indent_width: int = 2):
        super().__init__(indent_width)

    def header(self) -> str:
        u = self.unit
        return (
            "<!-- Generated with Tailwind CSS -->\n"
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            f'{u}<meta charset="UTF-8">\n'
            f'{u}<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            f'{u}<script src="https://cdn.tailwindcss.com"></script>\n'
            f"{u}<title>Generated Layout</title>\n"
            "</head>\n"
            '<body class="min-h-screen bg-gray-50">\n'
            f'{u}<main class="container mx-auto p-4">\n'
        )

    def footer(self) -> str:
        return f"{self.unit}</main>\n</body>\n</html>\n"

    def leaf(self, node: ComponentBase) -> list[str]:
        match node:
            case ButtonComponent():
                state = "opacity-50 cursor-not-allowed" if node.disabled else "cursor-pointer"
                classes = (
                    f"rounded-md font-medium transition-colors {TW_BUTTON_VARIANT[node.variant]} "
                    f"{TW_BUTTON_SIZE[node.size]} {state}"
                )
                return [
                    f'<button class="{classes}"{_flag("disabled", node.disabled)}'
                    f"{_handler('click', node.on_click)}{_style_attr(animation_css(node))}>{node.label}</button>"
                ]
            case TextComponent():
                tag = node.tag.value
                return [f'<{tag} class="{TW_TEXT[node.tag]}"{_style_attr(animation_css(node))}>{node.content}</{tag}>']
            case InputComponent():
                return [
                    f'<input type="{node.input_type.value}" placeholder="{escape_attr(node.placeholder)}" '
                    f'class="{TW_INPUT}"{_flag("required", node.required)}{_flag("disabled", node.disabled)}'
                    f"{_handler('change', node.on_change)}{_handler('input', node.on_input)}"
                    f"{_style_attr(animation_css(node))}>"
                ]
            case SelectComponent():
                return _select_lines(node, self.unit, f' class="{TW_SELECT}"')
            case ImageComponent():
                return [_image_line(node, ' class="max-w-full h-auto"')]
            case CustomComponent():
                lines = _custom_lines(node, "custom-placeholder text-sm text-red-500 italic")
                return [lines[0], '<div class="custom-component">', *(self.unit + line for line in lines[1:]), "</div>"]
        raise TypeError(f"Unsupported component: {node.component_type}")

    def open(self, node: ComponentBase) -> list[str]:
        match node:
            case ContainerComponent():
                match node.layout:
                    case FlexLayout():
                        direction = "flex-row" if node.layout.direction == FlexDirection.ROW else "flex-col"
                        wrap = " flex-wrap" if node.layout.wrap else ""
                        layout = (
                            f"flex {direction}{wrap} {TW_ALIGN[node.layout.align_items]} "
                            f"{TW_JUSTIFY[node.layout.justify_content]}"
                        )
                    case GridLayout():
                        layout = f"grid grid-cols-{min(node.layout.columns, 12)}"
                    case StackLayout():
                        layout = "flex flex-col"
                padding = node.padding
                classes = (
                    f"{layout} gap-{_spacing_step(node.gap, low=1)} "
                    f"pt-{_spacing_step(padding.top)} pr-{_spacing_step(padding.right)} "
                    f"pb-{_spacing_step(padding.bottom)} pl-{_spacing_step(padding.left)}"
                )
                return [f'<div class="{classes}"{_handler("click", node.on_click)}{_style_attr(animation_css(node))}>']
            case CardComponent():
                classes = ["bg-white", f"p-{_spacing_step(node.padding)}"]
                if node.border_radius:
                    classes.append("rounded-lg")
                if node.shadow:
                    classes.append("shadow-md")
                if node.border:
                    classes.append("border border-gray-200")
                return [
                    f'<div class="{" ".join(classes)}"{_handler("click", node.on_click)}'
                    f"{_style_attr(animation_css(node))}>"
                ]
        raise TypeError(f"Unsupported container: {node.component_type}")

    def close(self, node: ComponentBase) -> list[str]:
        return ["</div>"]


__all__ = ["HtmlGenerator", "TailwindHtmlGenerator"]
