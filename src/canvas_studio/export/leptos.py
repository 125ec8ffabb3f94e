"""
View-language target (Leptos ``view!`` macro).

Text children and attribute values are emitted as Rust string literals.
Bound attributes (``bindings``) become reactive closures, and handler names
become ``on:<event>`` attributes.
"""

from enum import Enum

from ..domain.components import (
    ButtonComponent,
    CardComponent,
    ComponentBase,
    ContainerComponent,
    CustomComponent,
    FlexDirection,
    FlexLayout,
    GridLayout,
    ImageComponent,
    InputComponent,
    SelectComponent,
    StackLayout,
    TextComponent,
)
from .base import (
    BUTTON_SIZE_CLASS,
    BUTTON_VARIANT_CLASS,
    CARD_SHADOW_CSS,
    FLEX_ALIGN_CSS,
    FLEX_JUSTIFY_CSS,
    TEMPLATE_NOT_FOUND,
    MarkupGenerator,
    custom_template,
    escape_string_literal as lit,
)


class ExportPreset(str, Enum):
    """Component library the generated view imports."""

    PLAIN = "plain"
    THAW = "thaw"
    MATERIAL = "material"
    LEPTOS_USE = "leptos_use"


PRESET_IMPORTS: dict[ExportPreset, str] = {
    ExportPreset.PLAIN: "use leptos::*;\n",
    ExportPreset.THAW: "use leptos::*;\nuse thaw::*;\n",
    ExportPreset.MATERIAL: "use leptos::*;\nuse leptos_material::*;\n",
    ExportPreset.LEPTOS_USE: "use leptos::*;\nuse leptos_use::*;\n",
}


def _reactive(variable: str) -> str:
    return f"move || {variable}.get()"


def _attrs(static: dict[str, str], bindings: dict[str, str] | None = None) -> str:
    """
    Render ``name=value`` pairs; a binding replaces the static value.

    Values in ``static`` are already Rust expressions (quoted literals,
    booleans or handler names).
    """
    attrs = dict(static)
    for attr, variable in (bindings or {}).items():
        attrs[attr] = _reactive(variable)
    return "".join(f" {name}={value}" for name, value in attrs.items())


def _text_child(value: str, bindings: dict[str, str], key: str) -> str:
    if key in bindings:
        return "{" + _reactive(bindings[key]) + "}"
    return f'"{lit(value)}"'


def _with_animation(node: ComponentBase, static: dict[str, str]) -> dict[str, str]:
    if node.animation and node.animation.to_css():
        static["style"] = f'"{node.animation.to_css()}"'
    return static


def _on(static: dict[str, str], event: str, handler: str | None) -> None:
    if handler:
        static[f"on:{event}"] = handler


class LeptosGenerator(MarkupGenerator):
    name = "leptos"
    extension = "rs"
    base_depth = 2

    def __init__(self, preset: ExportPreset = ExportPreset.PLAIN, indent_width: int = 4):
        super().__init__(indent_width)
        self.preset = preset

    def header(self) -> str:
        return (
            f"{PRESET_IMPORTS[self.preset]}\n"
            "#[component]\n"
            "pub fn App() -> impl IntoView {\n"
            f"{self.unit}view! {{\n"
        )

    def footer(self) -> str:
        return f"{self.unit}}}\n}}\n"

    def leaf(self, node: ComponentBase) -> list[str]:
        match node:
            case ButtonComponent():
                static = {
                    "class": f'"{BUTTON_VARIANT_CLASS[node.variant]} {BUTTON_SIZE_CLASS[node.size]}"',
                    "disabled": str(node.disabled).lower(),
                }
                _on(static, "click", node.on_click)
                label = _text_child(node.label, node.bindings, "label")
                bindings = {k: v for k, v in node.bindings.items() if k != "label"}
                return [f"<button{_attrs(_with_animation(node, static), bindings)}>{label}</button>"]

            case TextComponent():
                tag = node.tag.value
                static = {"class": f'"text-{node.style.value}"'}
                content = _text_child(node.content, node.bindings, "content")
                bindings = {k: v for k, v in node.bindings.items() if k != "content"}
                return [f"<{tag}{_attrs(_with_animation(node, static), bindings)}>{content}</{tag}>"]

            case InputComponent():
                static = {
                    "type": f'"{node.input_type.value}"',
                    "placeholder": f'"{lit(node.placeholder)}"',
                    "required": str(node.required).lower(),
                    "disabled": str(node.disabled).lower(),
                }
                _on(static, "change", node.on_change)
                _on(static, "input", node.on_input)
                return [f"<input{_attrs(_with_animation(node, static), node.bindings)} />"]

            case SelectComponent():
                static = {"disabled": str(node.disabled).lower()}
                _on(static, "change", node.on_change)
                lines = [f"<select{_attrs(_with_animation(node, static))}>"]
                if node.placeholder:
                    lines.append(
                        f'{self.unit}<option value="" disabled selected>"{lit(node.placeholder)}"</option>'
                    )
                for option in node.option_list():
                    lines.append(f'{self.unit}<option value="{lit(option)}">"{lit(option)}"</option>')
                lines.append("</select>")
                return lines

            case ImageComponent():
                static = {"src": f'"{lit(node.src)}"', "alt": f'"{lit(node.alt)}"'}
                if node.width:
                    static["width"] = f'"{lit(node.width)}"'
                if node.height:
                    static["height"] = f'"{lit(node.height)}"'
                _on(static, "click", node.on_click)
                return [f"<img{_attrs(_with_animation(node, static))} />"]

            case CustomComponent():
                lines = [f"// Custom component: {node.name}"]
                template = custom_template(node)
                if template is None:
                    lines.append(
                        f'<div class="custom-placeholder">"{TEMPLATE_NOT_FOUND}: {lit(node.name)}"</div>'
                    )
                else:
                    lines.extend(template.splitlines())
                return lines

        raise TypeError(f"Unsupported component: {node.component_type}")

    def open(self, node: ComponentBase) -> list[str]:
        match node:
            case ContainerComponent():
                style = [f"gap: {node.gap}px;", f"padding: {node.padding.css()};"]
                match node.layout:
                    case FlexLayout():
                        layout_class = "flex-row" if node.layout.direction == FlexDirection.ROW else "flex-col"
                        if node.layout.wrap:
                            layout_class += " flex-wrap"
                        style.append(f"align-items: {FLEX_ALIGN_CSS[node.layout.align_items]};")
                        style.append(f"justify-content: {FLEX_JUSTIFY_CSS[node.layout.justify_content]};")
                    case GridLayout():
                        layout_class = f"grid grid-cols-{node.layout.columns} grid-rows-{node.layout.rows}"
                    case StackLayout():
                        layout_class = "stack"
                if node.animation and node.animation.to_css():
                    style.append(node.animation.to_css())
                static = {"class": f'"container {layout_class}"', "style": f'"{" ".join(style)}"'}
                _on(static, "click", node.on_click)
                return [f"<div{_attrs(static)}>"]

            case CardComponent():
                card_class = "card border border-gray-200" if node.border else "card"
                style = [f"padding: {node.padding}px;", f"border-radius: {node.border_radius}px;"]
                if node.shadow:
                    style.append(CARD_SHADOW_CSS)
                if node.animation and node.animation.to_css():
                    style.append(node.animation.to_css())
                static = {"class": f'"{card_class}"', "style": f'"{" ".join(style)}"'}
                _on(static, "click", node.on_click)
                return [f"<div{_attrs(static)}>"]

        raise TypeError(f"Unsupported container: {node.component_type}")

    def close(self, node: ComponentBase) -> list[str]:
        return ["</div>"]


__all__ = ["ExportPreset", "PRESET_IMPORTS", "LeptosGenerator"]
