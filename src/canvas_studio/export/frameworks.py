"""
JavaScript component-framework targets: React (TSX), Vue SFC and Svelte.

Custom markup is injected as raw HTML through each framework's escape
hatch, inside a template literal.
"""

from ..domain.components import (
    ButtonComponent,
    CardComponent,
    ComponentBase,
    ContainerComponent,
    CustomComponent,
    ImageComponent,
    InputComponent,
    SelectComponent,
    TextComponent,
)
from .base import (
    BUTTON_SIZE_CLASS,
    BUTTON_VARIANT_CLASS,
    TEMPLATE_NOT_FOUND,
    MarkupGenerator,
    animation_css,
    card_declarations,
    container_declarations,
    custom_template,
    escape_attr,
    escape_template_literal,
)


def _button_class(node: ButtonComponent) -> str:
    return f"{BUTTON_VARIANT_CLASS[node.variant]} {BUTTON_SIZE_CLASS[node.size]}"


def _image_size(node: ImageComponent) -> str:
    size = ""
    if node.width:
        size += f' width="{escape_attr(node.width)}"'
    if node.height:
        size += f' height="{escape_attr(node.height)}"'
    return size


# ============================================================================
# React
# ============================================================================

JSX_TEXT_ESCAPES = {"{": "{'{'}", "}": "{'}'}", "<": "{'<'}", ">": "{'>'}"}


def _jsx_text(value: str) -> str:
    return "".join(JSX_TEXT_ESCAPES.get(ch, ch) for ch in value)


def _camel(prop: str) -> str:
    head, *rest = prop.split("-")
    return head + "".join(part.title() for part in rest)


def _style_object(declarations: list[str]) -> str:
    """``["gap: 8px;", ...]`` -> ``{{ gap: '8px', ... }}``."""
    pairs = []
    for declaration in declarations:
        if not declaration:
            continue
        prop, _, value = declaration.rstrip(";").partition(":")
        value = value.strip().replace("'", "\\'")
        pairs.append(f"{_camel(prop.strip())}: '{value}'")
    return "{{ " + ", ".join(pairs) + " }}" if pairs else ""


def _jsx_attrs(node: ComponentBase, *extra: str, **handlers: str | None) -> str:
    attrs = [a for a in extra if a]
    attrs.extend(f"{event}={{{handler}}}" for event, handler in handlers.items() if handler)
    style = _style_object([animation_css(node)])
    if style:
        attrs.append(f"style={style}")
    return "".join(f" {attr}" for attr in attrs)


def _jsx_bool(value: bool) -> str:
    return "{" + str(value).lower() + "}"


class ReactGenerator(MarkupGenerator):
    name = "react"
    extension = "tsx"
    base_depth = 3

    def __init__(self, indent_width: int = 2):
        super().__init__(indent_width)

    def header(self) -> str:
        u = self.unit
        return (
            "import React from 'react';\n\n"
            "export function GeneratedLayout() {\n"
            f"{u}return (\n"
            f"{u * 2}<>\n"
        )

    def footer(self) -> str:
        u = self.unit
        return f"{u * 2}</>\n{u});\n}}\n\nexport default GeneratedLayout;\n"

    def leaf(self, node: ComponentBase) -> list[str]:
        match node:
            case ButtonComponent():
                attrs = _jsx_attrs(
                    node,
                    f'className="{_button_class(node)}"',
                    f"disabled={_jsx_bool(node.disabled)}",
                    onClick=node.on_click,
                )
                return [f"<button{attrs}>{_jsx_text(node.label)}</button>"]
            case TextComponent():
                tag = node.tag.value
                attrs = _jsx_attrs(node, f'className="text-{node.style.value}"')
                return [f"<{tag}{attrs}>{_jsx_text(node.content)}</{tag}>"]
            case InputComponent():
                attrs = _jsx_attrs(
                    node,
                    f'type="{node.input_type.value}"',
                    f'placeholder="{escape_attr(node.placeholder)}"',
                    f"required={_jsx_bool(node.required)}",
                    f"disabled={_jsx_bool(node.disabled)}",
                    onChange=node.on_change,
                    onInput=node.on_input,
                )
                return [f"<input{attrs} />"]
            case SelectComponent():
                attrs = _jsx_attrs(
                    node, 'defaultValue=""', f"disabled={_jsx_bool(node.disabled)}", onChange=node.on_change
                )
                lines = [f"<select{attrs}>"]
                if node.placeholder:
                    lines.append(f'{self.unit}<option value="" disabled>{_jsx_text(node.placeholder)}</option>')
                for option in node.option_list():
                    lines.append(f'{self.unit}<option value="{escape_attr(option)}">{_jsx_text(option)}</option>')
                lines.append("</select>")
                return lines
            case ImageComponent():
                attrs = _jsx_attrs(
                    node,
                    f'src="{escape_attr(node.src)}"',
                    f'alt="{escape_attr(node.alt)}"',
                    _image_size(node).strip(),
                    onClick=node.on_click,
                )
                return [f"<img{attrs} />"]
            case CustomComponent():
                lines = [f"{{/* Custom: {node.name} */}}"]
                template = custom_template(node)
                if template is None:
                    lines.append(f'<div className="custom-placeholder">{TEMPLATE_NOT_FOUND}</div>')
                else:
                    lines.append(
                        f"<div dangerouslySetInnerHTML={{{{ __html: `{escape_template_literal(template)}` }}}} />"
                    )
                return lines
        raise TypeError(f"Unsupported component: {node.component_type}")

    def open(self, node: ComponentBase) -> list[str]:
        match node:
            case ContainerComponent():
                declarations = container_declarations(node)
                class_name = ""
            case CardComponent():
                declarations = card_declarations(node)
                class_name = ' className="card"'
            case _:
                raise TypeError(f"Unsupported container: {node.component_type}")
        style = _style_object(declarations + [animation_css(node)])
        handler = f" onClick={{{node.on_click}}}" if node.on_click else ""
        return [f"<div{class_name}{handler} style={style}>"]

    def close(self, node: ComponentBase) -> list[str]:
        return ["</div>"]


# ============================================================================
# Vue
# ============================================================================


def _vue_flag(name: str, value: bool) -> str:
    return f' :{name}="{str(value).lower()}"'


def _vue_on(event: str, handler: str | None) -> str:
    return f' @{event}="{escape_attr(handler)}"' if handler else ""


def _inline_style(*declarations: str) -> str:
    style = " ".join(d for d in declarations if d)
    return f' style="{style}"' if style else ""


class VueGenerator(MarkupGenerator):
    name = "vue"
    extension = "vue"
    base_depth = 2

    def __init__(self, indent_width: int = 2):
        super().__init__(indent_width)

    def header(self) -> str:
        return f'<template>\n{self.unit}<div class="generated-layout">\n'

    def footer(self) -> str:
        u = self.unit
        return (
            f"{u}</div>\n</template>\n\n"
            '<script setup lang="ts">\n'
            "// Generated layout\n"
            "</script>\n\n"
            "<style scoped>\n"
            ".generated-layout {\n"
            f"{u}/* Add your styles here */\n"
            "}\n"
            "</style>\n"
        )

    def leaf(self, node: ComponentBase) -> list[str]:
        style = _inline_style(animation_css(node))
        match node:
            case ButtonComponent():
                return [
                    f'<button class="{_button_class(node)}"{_vue_flag("disabled", node.disabled)}'
                    f'{_vue_on("click", node.on_click)}{style}>{node.label}</button>'
                ]
            case TextComponent():
                tag = node.tag.value
                return [f'<{tag} class="text-{node.style.value}"{style}>{node.content}</{tag}>']
            case InputComponent():
                return [
                    f'<input type="{node.input_type.value}" placeholder="{escape_attr(node.placeholder)}"'
                    f'{_vue_flag("required", node.required)}{_vue_flag("disabled", node.disabled)}'
                    f'{_vue_on("change", node.on_change)}{_vue_on("input", node.on_input)}{style} />'
                ]
            case SelectComponent():
                lines = [f'<select{_vue_flag("disabled", node.disabled)}{_vue_on("change", node.on_change)}{style}>']
                if node.placeholder:
                    lines.append(f'{self.unit}<option value="" disabled selected>{node.placeholder}</option>')
                for option in node.option_list():
                    lines.append(f'{self.unit}<option value="{escape_attr(option)}">{option}</option>')
                lines.append("</select>")
                return lines
            case ImageComponent():
                return [
                    f'<img src="{escape_attr(node.src)}" alt="{escape_attr(node.alt)}"{_image_size(node)}'
                    f'{_vue_on("click", node.on_click)}{style} />'
                ]
            case CustomComponent():
                lines = [f"<!-- Custom: {node.name} -->"]
                template = custom_template(node)
                if template is None:
                    lines.append(f'<div class="custom-placeholder">{TEMPLATE_NOT_FOUND}</div>')
                else:
                    lines.append(f'<div v-html="`{escape_attr(escape_template_literal(template))}`"></div>')
                return lines
        raise TypeError(f"Unsupported component: {node.component_type}")

    def open(self, node: ComponentBase) -> list[str]:
        match node:
            case ContainerComponent():
                style = _inline_style(*container_declarations(node), animation_css(node))
                return [f"<div{_vue_on('click', node.on_click)}{style}>"]
            case CardComponent():
                style = _inline_style(*card_declarations(node), animation_css(node))
                return [f'<div class="card"{_vue_on("click", node.on_click)}{style}>']
        raise TypeError(f"Unsupported container: {node.component_type}")

    def close(self, node: ComponentBase) -> list[str]:
        return ["</div>"]


# ============================================================================
# Svelte
# ============================================================================

SVELTE_STYLES = """\
  .generated-layout {
    /* Add your styles here */
  }

  .btn {
    padding: 8px 16px;
    border-radius: 6px;
    cursor: pointer;
    transition: all 0.2s;
  }

  .btn-primary {
    background: #3b82f6;
    color: white;
    border: none;
  }

  .btn-secondary {
    background: #e5e7eb;
    color: #374151;
    border: none;
  }

  input {
    width: 100%;
    padding: 8px 12px;
    border: 1px solid #d1d5db;
    border-radius: 6px;
  }
"""


def _svelte_on(event: str, handler: str | None) -> str:
    return f" on:{event}={{{handler}}}" if handler else ""


def _flag(name: str, enabled: bool) -> str:
    return f" {name}" if enabled else ""


class SvelteGenerator(MarkupGenerator):
    name = "svelte"
    extension = "svelte"
    base_depth = 1

    def __init__(self, indent_width: int = 2):
        super().__init__(indent_width)

    def header(self) -> str:
        u = self.unit
        return (
            '<script lang="ts">\n'
            f"{u}// Generated layout\n"
            f"{u}// Props can be added here\n"
            "</script>\n\n"
            '<div class="generated-layout">\n'
        )

    def footer(self) -> str:
        return f"</div>\n\n<style>\n{SVELTE_STYLES}</style>\n"

    def leaf(self, node: ComponentBase) -> list[str]:
        style = _inline_style(animation_css(node))
        match node:
            case ButtonComponent():
                return [
                    f'<button class="btn {_button_class(node)}" disabled={{{str(node.disabled).lower()}}}'
                    f"{_svelte_on('click', node.on_click)}{style}>{node.label}</button>"
                ]
            case TextComponent():
                tag = node.tag.value
                return [f'<{tag} class="text-{node.style.value}"{style}>{node.content}</{tag}>']
            case InputComponent():
                return [
                    f'<input type="{node.input_type.value}" placeholder="{escape_attr(node.placeholder)}"'
                    f"{_flag('required', node.required)}{_flag('disabled', node.disabled)}"
                    f"{_svelte_on('change', node.on_change)}{_svelte_on('input', node.on_input)}{style} />"
                ]
            case SelectComponent():
                lines = [f"<select{_flag('disabled', node.disabled)}{_svelte_on('change', node.on_change)}{style}>"]
                if node.placeholder:
                    lines.append(f'{self.unit}<option value="" disabled selected>{node.placeholder}</option>')
                for option in node.option_list():
                    lines.append(f'{self.unit}<option value="{escape_attr(option)}">{option}</option>')
                lines.append("</select>")
                return lines
            case ImageComponent():
                return [
                    f'<img src="{escape_attr(node.src)}" alt="{escape_attr(node.alt)}"{_image_size(node)}'
                    f"{_svelte_on('click', node.on_click)}{style} />"
                ]
            case CustomComponent():
                lines = [f"<!-- Custom: {node.name} -->"]
                template = custom_template(node)
                if template is None:
                    lines.append(f'<div class="custom-placeholder">{TEMPLATE_NOT_FOUND}</div>')
                else:
                    lines.append(f"{{@html `{escape_template_literal(template)}`}}")
                return lines
        raise TypeError(f"Unsupported component: {node.component_type}")

    def open(self, node: ComponentBase) -> list[str]:
        match node:
            case ContainerComponent():
                style = _inline_style(*container_declarations(node), animation_css(node))
                return [f"<div{_svelte_on('click', node.on_click)}{style}>"]
            case CardComponent():
                style = _inline_style(*card_declarations(node), animation_css(node))
                return [f'<div class="card"{_svelte_on("click", node.on_click)}{style}>']
        raise TypeError(f"Unsupported container: {node.component_type}")

    def close(self, node: ComponentBase) -> list[str]:
        return ["</div>"]


__all__ = ["ReactGenerator", "VueGenerator", "SvelteGenerator"]
