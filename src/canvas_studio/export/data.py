"""
Data targets: the IR itself as JSON, its JSON Schema, and TypeScript
declarations for consumers of that JSON.
"""

from typing import Any

from ..core.json import safe_json_dumps
from ..domain.components import ComponentBase, component_list_adapter, dump_components
from .base import CodeGenerator

JSON_SCHEMA_DRAFT = "https://json-schema.org/draft/2020-12/schema"


class JsonGenerator(CodeGenerator):
    """The forest in its canonical serialized form."""

    name = "json"
    extension = "json"

    def render(self, components: list[ComponentBase]) -> str:
        return safe_json_dumps(dump_components(components), indent=2) + "\n"


class JsonSchemaGenerator(CodeGenerator):
    """
    JSON Schema describing a component forest.

    The schema comes from the IR models themselves, so it always tracks
    the current field set. The exported forest is attached as an example.
    """

    name = "json_schema"
    extension = "schema.json"

    def render(self, components: list[ComponentBase]) -> str:
        schema: dict[str, Any] = {
            "$schema": JSON_SCHEMA_DRAFT,
            "title": "Canvas Layout",
            "description": "Ordered list of canvas components",
        }
        schema.update(component_list_adapter.json_schema(mode="serialization"))
        schema["examples"] = [dump_components(components)]
        return safe_json_dumps(schema, indent=2) + "\n"


TYPESCRIPT_DECLARATIONS = """\
// Generated TypeScript declarations for canvas layouts

export type ButtonVariant = 'primary' | 'secondary' | 'outline' | 'ghost';
export type ButtonSize = 'small' | 'medium' | 'large';
export type TextStyle = 'heading1' | 'heading2' | 'heading3' | 'body' | 'caption';
export type TextTag = 'h1' | 'h2' | 'h3' | 'p' | 'span';
export type InputType = 'text' | 'password' | 'email' | 'number' | 'tel';
export type FlexDirection = 'row' | 'column';
export type FlexAlign = 'start' | 'center' | 'end' | 'stretch' | 'baseline';
export type FlexJustify = 'start' | 'center' | 'end' | 'between' | 'around' | 'evenly';
export type AnimationType =
  | 'none'
  | 'fade_in'
  | 'slide_in_up'
  | 'slide_in_down'
  | 'slide_in_left'
  | 'slide_in_right'
  | 'bounce'
  | 'zoom_in'
  | 'pulse';

export interface Animation {
  animation_type: AnimationType;
  duration: number;
  delay: number;
  infinite: boolean;
}

export interface Spacing {
  top: number;
  right: number;
  bottom: number;
  left: number;
}

export type Layout =
  | { type: 'flex'; direction: FlexDirection; wrap: boolean; align_items: FlexAlign; justify_content: FlexJustify }
  | { type: 'grid'; columns: number; rows: number }
  | { type: 'stack' };

interface ComponentBase {
  id: string;
  animation: Animation | null;
}

export interface ButtonComponent extends ComponentBase {
  kind: 'button';
  label: string;
  variant: ButtonVariant;
  size: ButtonSize;
  disabled: boolean;
  on_click: string | null;
  bindings: Record<string, string>;
}

export interface TextComponent extends ComponentBase {
  kind: 'text';
  content: string;
  style: TextStyle;
  tag: TextTag;
  bindings: Record<string, string>;
}

export interface InputComponent extends ComponentBase {
  kind: 'input';
  placeholder: string;
  input_type: InputType;
  required: boolean;
  disabled: boolean;
  on_change: string | null;
  on_input: string | null;
  bindings: Record<string, string>;
}

export interface SelectComponent extends ComponentBase {
  kind: 'select';
  options: string;
  placeholder: string;
  disabled: boolean;
  on_change: string | null;
}

export interface ImageComponent extends ComponentBase {
  kind: 'image';
  src: string;
  alt: string;
  width: string | null;
  height: string | null;
  on_click: string | null;
}

export interface ContainerComponent extends ComponentBase {
  kind: 'container';
  children: CanvasComponent[];
  layout: Layout;
  gap: number;
  padding: Spacing;
  on_click: string | null;
}

export interface CardComponent extends ComponentBase {
  kind: 'card';
  children: CanvasComponent[];
  padding: number;
  shadow: boolean;
  border: boolean;
  border_radius: number;
  on_click: string | null;
}

export interface CustomComponent extends ComponentBase {
  kind: 'custom';
  name: string;
  template: string | null;
  props: Record<string, boolean | number | string | null>;
}

export type CanvasComponent =
  | ButtonComponent
  | TextComponent
  | InputComponent
  | SelectComponent
  | ImageComponent
  | ContainerComponent
  | CardComponent
  | CustomComponent;

export type CanvasLayout = CanvasComponent[];

// Type guards
export const isButton = (c: CanvasComponent): c is ButtonComponent => c.kind === 'button';
export const isText = (c: CanvasComponent): c is TextComponent => c.kind === 'text';
export const isInput = (c: CanvasComponent): c is InputComponent => c.kind === 'input';
export const isSelect = (c: CanvasComponent): c is SelectComponent => c.kind === 'select';
export const isImage = (c: CanvasComponent): c is ImageComponent => c.kind === 'image';
export const isContainer = (c: CanvasComponent): c is ContainerComponent => c.kind === 'container';
export const isCard = (c: CanvasComponent): c is CardComponent => c.kind === 'card';
export const isCustom = (c: CanvasComponent): c is CustomComponent => c.kind === 'custom';
"""


class TypeScriptGenerator(CodeGenerator):
    """
    Type declarations for the serialized IR.

    The output does not depend on the forest; it is the same for every
    document.
    """

    name = "typescript"
    extension = "d.ts"

    def render(self, components: list[ComponentBase]) -> str:
        return TYPESCRIPT_DECLARATIONS


__all__ = ["JsonGenerator", "JsonSchemaGenerator", "TypeScriptGenerator", "TYPESCRIPT_DECLARATIONS"]
