"""Convenience constructors for each component variant.

Every call mints a fresh id, so the results can be inserted into a tree
without further bookkeeping.
"""

from typing import Any

from .components import (
    ButtonComponent,
    TextComponent,
    InputComponent,
    SelectComponent,
    ImageComponent,
    ContainerComponent,
    CardComponent,
    CustomComponent,
    ComponentBase,
    FlexLayout,
    GridLayout,
    StackLayout,
    PropValue,
    TextStyle,
    TextTag,
)


def button(label: str = "Button", **fields: Any) -> ButtonComponent:
    return ButtonComponent(label=label, **fields)


def text(content: str = "Text", **fields: Any) -> TextComponent:
    return TextComponent(content=content, **fields)


def heading(content: str, level: int = 1) -> TextComponent:
    """Text node preconfigured as an h1/h2/h3 heading."""
    level = min(max(level, 1), 3)
    return TextComponent(
        content=content,
        style=TextStyle(f"heading{level}"),
        tag=TextTag(f"h{level}"),
    )


def input_(placeholder: str = "", **fields: Any) -> InputComponent:
    return InputComponent(placeholder=placeholder, **fields)


def select(options: list[str] | str | None = None, **fields: Any) -> SelectComponent:
    if isinstance(options, list):
        fields["options"] = ", ".join(options)
    elif options is not None:
        fields["options"] = options
    return SelectComponent(**fields)


def image(src: str, alt: str = "", **fields: Any) -> ImageComponent:
    return ImageComponent(src=src, alt=alt, **fields)


def container(
    *children: ComponentBase,
    layout: FlexLayout | GridLayout | StackLayout | None = None,
    **fields: Any,
) -> ContainerComponent:
    return ContainerComponent(
        children=list(children),
        layout=layout or FlexLayout(),
        **fields,
    )


def card(*children: ComponentBase, **fields: Any) -> CardComponent:
    return CardComponent(children=list(children), **fields)


def custom(
    name: str,
    template: str | None = None,
    props: dict[str, PropValue] | None = None,
) -> CustomComponent:
    return CustomComponent(name=name, template=template, props=props or {})


__all__ = [
    "button",
    "text",
    "heading",
    "input_",
    "select",
    "image",
    "container",
    "card",
    "custom",
]
