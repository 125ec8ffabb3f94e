"""Tests for the component IR."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from canvas_studio.domain.components import (
    Animation,
    AnimationType,
    ButtonComponent,
    ButtonVariant,
    CardComponent,
    ContainerComponent,
    FlexDirection,
    FlexLayout,
    GridLayout,
    SelectComponent,
    Spacing,
    dump_components,
    load_component,
    load_components,
)
from canvas_studio.domain.factory import button, card, container, custom, text


@pytest.mark.unit
def test_defaults():
    btn = ButtonComponent()
    assert btn.kind == "button"
    assert btn.variant == ButtonVariant.PRIMARY
    box = ContainerComponent()
    assert isinstance(box.layout, FlexLayout)
    assert box.layout.direction == FlexDirection.COLUMN
    assert box.gap == 8
    assert box.padding == Spacing()
    crd = CardComponent()
    assert (crd.padding, crd.shadow, crd.border, crd.border_radius) == (16, True, True, 8)


@pytest.mark.unit
def test_fresh_ids():
    assert ButtonComponent().id != ButtonComponent().id


@pytest.mark.unit
def test_children_of():
    assert button().children_of() is None
    assert not button().is_container_like()
    child = text("x")
    assert container(child).children_of() == [child]
    assert card().is_container_like()


@pytest.mark.unit
def test_display_name():
    assert button("Save").display_name() == "Save"
    assert text("").display_name() == "Text"
    assert custom("Widget").display_name() == "Widget"
    assert container().component_type == "Container"


@pytest.mark.unit
def test_select_option_list():
    sel = SelectComponent(options=" Red, ,Green ,Blue")
    assert sel.option_list() == ["Red", "Green", "Blue"]


@pytest.mark.unit
def test_animation_css():
    assert Animation().to_css() == ""
    anim = Animation(animation_type=AnimationType.FADE_IN, duration=0.5, infinite=True)
    assert anim.to_css() == "animation: fadeIn 0.5s ease-in-out 0s infinite both;"


@pytest.mark.unit
def test_spacing_css():
    assert Spacing(top=1, right=2, bottom=3, left=4).css() == "1px 2px 3px 4px"


@pytest.mark.unit
def test_extra_fields_rejected():
    with pytest.raises(PydanticValidationError):
        ButtonComponent(label="x", colour="red")


@pytest.mark.unit
def test_discriminated_load():
    node = load_component({"kind": "card", "children": [{"kind": "button", "label": "Go"}]})
    assert isinstance(node, CardComponent)
    assert isinstance(node.children[0], ButtonComponent)
    assert node.children[0].label == "Go"


@pytest.mark.unit
def test_grid_layout_load():
    node = load_component({"kind": "container", "layout": {"type": "grid", "columns": 3}})
    assert isinstance(node.layout, GridLayout)
    assert node.layout.columns == 3


@pytest.mark.unit
def test_unknown_kind_rejected():
    with pytest.raises(PydanticValidationError):
        load_component({"kind": "slider"})


@pytest.mark.unit
def test_dump_load_preserves_structure(sample_tree):
    data = dump_components(sample_tree)
    restored = load_components(data)
    assert restored == sample_tree
    assert data[0]["kind"] == "container"
