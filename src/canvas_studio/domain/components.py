"""Component IR.

A design is an ordered list of ``CanvasComponent`` values. The union is
closed: eight variants, discriminated by ``kind``. Only ``Container`` and
``Card`` own children; ownership is exclusive, so a node is reachable from
exactly one sequence and there are no back-references.
"""

from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..core.id import ComponentId, new_component_id


# ============================================================================
# Enumerations
# ============================================================================


class ButtonVariant(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    OUTLINE = "outline"
    GHOST = "ghost"


class ButtonSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class TextStyle(str, Enum):
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    BODY = "body"
    CAPTION = "caption"


class TextTag(str, Enum):
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    P = "p"
    SPAN = "span"


class InputType(str, Enum):
    TEXT = "text"
    PASSWORD = "password"
    EMAIL = "email"
    NUMBER = "number"
    TEL = "tel"


class FlexDirection(str, Enum):
    ROW = "row"
    COLUMN = "column"


class FlexAlign(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"
    BASELINE = "baseline"


class FlexJustify(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"
    BETWEEN = "between"
    AROUND = "around"
    EVENLY = "evenly"


class AnimationType(str, Enum):
    NONE = "none"
    FADE_IN = "fade_in"
    SLIDE_IN_UP = "slide_in_up"
    SLIDE_IN_DOWN = "slide_in_down"
    SLIDE_IN_LEFT = "slide_in_left"
    SLIDE_IN_RIGHT = "slide_in_right"
    BOUNCE = "bounce"
    ZOOM_IN = "zoom_in"
    PULSE = "pulse"


# Keyframe names used in exported CSS
ANIMATION_KEYFRAMES: dict[AnimationType, str] = {
    AnimationType.FADE_IN: "fadeIn",
    AnimationType.SLIDE_IN_UP: "slideInUp",
    AnimationType.SLIDE_IN_DOWN: "slideInDown",
    AnimationType.SLIDE_IN_LEFT: "slideInLeft",
    AnimationType.SLIDE_IN_RIGHT: "slideInRight",
    AnimationType.BOUNCE: "bounce",
    AnimationType.ZOOM_IN: "zoomIn",
    AnimationType.PULSE: "pulse",
}


# ============================================================================
# Value objects
# ============================================================================


class Animation(BaseModel):
    """Entrance/loop animation; affects export styling only."""

    animation_type: AnimationType = Field(default=AnimationType.NONE)
    duration: float = Field(default=0.3, ge=0.0, description="Seconds")
    delay: float = Field(default=0.0, ge=0.0, description="Seconds")
    infinite: bool = Field(default=False)

    def shorthand(self) -> str:
        """Value of the CSS ``animation`` shorthand ("" for no animation)."""
        if self.animation_type == AnimationType.NONE:
            return ""
        name = ANIMATION_KEYFRAMES[self.animation_type]
        iteration = "infinite" if self.infinite else "1"
        return f"{name} {self.duration:g}s ease-in-out {self.delay:g}s {iteration} both"

    def to_css(self) -> str:
        """Render as a CSS ``animation`` declaration."""
        value = self.shorthand()
        return f"animation: {value};" if value else ""


class Spacing(BaseModel):
    """Four-sided spacing in pixels."""

    top: int = Field(default=0, ge=0)
    right: int = Field(default=0, ge=0)
    bottom: int = Field(default=0, ge=0)
    left: int = Field(default=0, ge=0)

    def css(self) -> str:
        return f"{self.top}px {self.right}px {self.bottom}px {self.left}px"


class FlexLayout(BaseModel):
    type: Literal["flex"] = "flex"
    direction: FlexDirection = Field(default=FlexDirection.COLUMN)
    wrap: bool = Field(default=False)
    align_items: FlexAlign = Field(default=FlexAlign.START)
    justify_content: FlexJustify = Field(default=FlexJustify.START)


class GridLayout(BaseModel):
    type: Literal["grid"] = "grid"
    columns: int = Field(default=2, ge=1)
    rows: int = Field(default=2, ge=1)


class StackLayout(BaseModel):
    type: Literal["stack"] = "stack"


Layout = Annotated[Union[FlexLayout, GridLayout, StackLayout], Field(discriminator="type")]

PropValue = Union[bool, float, str, None]


# ============================================================================
# Component variants
# ============================================================================


class ComponentBase(BaseModel):
    """Fields and helpers shared by every variant."""

    model_config = ConfigDict(extra="forbid")

    type_name: ClassVar[str] = "Component"

    id: ComponentId = Field(default_factory=new_component_id, description="Unique identifier")
    animation: Animation | None = Field(default=None)

    @property
    def component_type(self) -> str:
        return self.type_name

    def children_of(self) -> list["CanvasComponent"] | None:
        """Owned child sequence, or None for leaf variants."""
        return None

    def is_container_like(self) -> bool:
        return self.children_of() is not None

    def display_name(self) -> str:
        """Short human label used by breadcrumbs and tree views."""
        return self.type_name


class ButtonComponent(ComponentBase):
    type_name: ClassVar[str] = "Button"

    kind: Literal["button"] = "button"
    label: str = Field(default="Button")
    variant: ButtonVariant = Field(default=ButtonVariant.PRIMARY)
    size: ButtonSize = Field(default=ButtonSize.MEDIUM)
    disabled: bool = Field(default=False)
    on_click: str | None = Field(default=None, description="Click handler name")
    bindings: dict[str, str] = Field(default_factory=dict, description="Attribute -> variable")

    def display_name(self) -> str:
        return self.label


class TextComponent(ComponentBase):
    type_name: ClassVar[str] = "Text"

    kind: Literal["text"] = "text"
    content: str = Field(default="")
    style: TextStyle = Field(default=TextStyle.BODY)
    tag: TextTag = Field(default=TextTag.P)
    bindings: dict[str, str] = Field(default_factory=dict)

    def display_name(self) -> str:
        return self.content or self.type_name


class InputComponent(ComponentBase):
    type_name: ClassVar[str] = "Input"

    kind: Literal["input"] = "input"
    placeholder: str = Field(default="")
    input_type: InputType = Field(default=InputType.TEXT)
    required: bool = Field(default=False)
    disabled: bool = Field(default=False)
    on_change: str | None = Field(default=None)
    on_input: str | None = Field(default=None)
    bindings: dict[str, str] = Field(default_factory=dict)

    def display_name(self) -> str:
        return self.placeholder or self.type_name


class SelectComponent(ComponentBase):
    type_name: ClassVar[str] = "Select"

    kind: Literal["select"] = "select"
    options: str = Field(default="Option 1, Option 2, Option 3", description="Comma separated")
    placeholder: str = Field(default="Select an option")
    disabled: bool = Field(default=False)
    on_change: str | None = Field(default=None)

    def option_list(self) -> list[str]:
        """Trimmed, non-empty option labels in declaration order."""
        return [opt.strip() for opt in self.options.split(",") if opt.strip()]

    def display_name(self) -> str:
        return self.placeholder or self.type_name


class ImageComponent(ComponentBase):
    type_name: ClassVar[str] = "Image"

    kind: Literal["image"] = "image"
    src: str = Field(default="")
    alt: str = Field(default="")
    width: str | None = Field(default=None)
    height: str | None = Field(default=None)
    on_click: str | None = Field(default=None)

    def display_name(self) -> str:
        return self.alt or self.type_name


class ContainerComponent(ComponentBase):
    type_name: ClassVar[str] = "Container"

    kind: Literal["container"] = "container"
    children: list["CanvasComponent"] = Field(default_factory=list)
    layout: Layout = Field(default_factory=FlexLayout)
    gap: int = Field(default=8, ge=0)
    padding: Spacing = Field(default_factory=Spacing)
    on_click: str | None = Field(default=None)

    def children_of(self) -> list["CanvasComponent"]:
        return self.children


class CardComponent(ComponentBase):
    type_name: ClassVar[str] = "Card"

    kind: Literal["card"] = "card"
    children: list["CanvasComponent"] = Field(default_factory=list)
    padding: int = Field(default=16, ge=0)
    shadow: bool = Field(default=True)
    border: bool = Field(default=True)
    border_radius: int = Field(default=8, ge=0)
    on_click: str | None = Field(default=None)

    def children_of(self) -> list["CanvasComponent"]:
        return self.children


class CustomComponent(ComponentBase):
    type_name: ClassVar[str] = "Custom"

    kind: Literal["custom"] = "custom"
    name: str = Field(default="")
    template: str | None = Field(default=None, description="Raw markup")
    props: dict[str, PropValue] = Field(default_factory=dict)

    def display_name(self) -> str:
        return self.name or self.type_name


CanvasComponent = Annotated[
    Union[
        ButtonComponent,
        TextComponent,
        InputComponent,
        SelectComponent,
        ImageComponent,
        ContainerComponent,
        CardComponent,
        CustomComponent,
    ],
    Field(discriminator="kind"),
]

ContainerComponent.model_rebuild()
CardComponent.model_rebuild()

COMPONENT_TYPES: tuple[type[ComponentBase], ...] = (
    ButtonComponent,
    TextComponent,
    InputComponent,
    SelectComponent,
    ImageComponent,
    ContainerComponent,
    CardComponent,
    CustomComponent,
)

component_adapter: TypeAdapter[Any] = TypeAdapter(CanvasComponent)
component_list_adapter: TypeAdapter[list[Any]] = TypeAdapter(list[CanvasComponent])


def dump_components(components: list[ComponentBase]) -> list[dict[str, Any]]:
    """JSON-ready dicts for a component sequence."""
    return [component.model_dump(mode="json") for component in components]


def load_components(data: Any) -> list[ComponentBase]:
    """Validate raw data (e.g. decoded JSON) into a component sequence."""
    return component_list_adapter.validate_python(data)


def load_component(data: Any) -> ComponentBase:
    return component_adapter.validate_python(data)


__all__ = [
    "ButtonVariant",
    "ButtonSize",
    "TextStyle",
    "TextTag",
    "InputType",
    "FlexDirection",
    "FlexAlign",
    "FlexJustify",
    "AnimationType",
    "Animation",
    "Spacing",
    "FlexLayout",
    "GridLayout",
    "StackLayout",
    "Layout",
    "PropValue",
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
    "COMPONENT_TYPES",
    "dump_components",
    "load_components",
    "load_component",
]
