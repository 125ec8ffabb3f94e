"""Tests for the Tree Engine."""

import pytest
from hypothesis import given, settings, strategies as st

from canvas_studio.domain.factory import button, card, container, image, text
from canvas_studio.engine import tree


def _labels(components):
    return [node.display_name() for node, _ in tree.walk(components)]


@pytest.mark.unit
def test_walk_preorder(sample_tree):
    kinds = [(node.component_type, depth) for node, depth in tree.walk(sample_tree)]
    assert kinds == [
        ("Container", 0),
        ("Text", 1),
        ("Card", 1),
        ("Button", 2),
        ("Input", 2),
        ("Image", 0),
    ]
    assert tree.count_nodes(sample_tree) == 6
    assert len(tree.collect_ids(sample_tree)) == 6


@pytest.mark.unit
def test_get_returns_copy(sample_tree):
    submit = sample_tree[0].children[1].children[0]
    found = tree.get(sample_tree, submit.id)
    assert found == submit
    found.label = "Changed"
    assert submit.label == "Submit"
    assert tree.get(sample_tree, "cmp_missing") is None


@pytest.mark.unit
def test_add_child_to_container_only(sample_tree):
    box = sample_tree[0]
    assert tree.add_child(sample_tree, box.id, button("New"))
    assert box.children[-1].label == "New"

    before = [n.model_copy(deep=True) for n in sample_tree]
    assert not tree.add_child(sample_tree, sample_tree[1].id, button("No"))
    assert not tree.add_child(sample_tree, "cmp_missing", button("No"))
    assert sample_tree == before


@pytest.mark.unit
def test_remove_takes_subtree(sample_tree):
    inner = sample_tree[0].children[1]
    descendant_ids = [node.id for node, _ in tree.walk([inner])]

    removed = tree.remove(sample_tree, inner.id)

    assert removed is inner
    for component_id in descendant_ids:
        assert not tree.contains(sample_tree, component_id)
    assert tree.remove(sample_tree, inner.id) is None


@pytest.mark.unit
def test_update_and_missing(sample_tree):
    target = sample_tree[1]
    assert tree.update(sample_tree, target.id, lambda node: setattr(node, "alt", "New alt"))
    assert sample_tree[1].alt == "New alt"
    assert not tree.update(sample_tree, "cmp_missing", lambda node: None)


@pytest.mark.unit
def test_replace_keeps_position(sample_tree):
    old = sample_tree[0].children[0]
    new = text("Replacement", id=old.id)
    assert tree.replace(sample_tree, old.id, new)
    assert sample_tree[0].children[0] is new
    assert not tree.replace(sample_tree, "cmp_missing", new)


@pytest.mark.unit
def test_duplicate_remints_every_id(sample_tree):
    original_ids = set(tree.collect_ids(sample_tree))
    copy = tree.duplicate(sample_tree[0])
    copy_ids = tree.collect_ids([copy])

    assert len(copy_ids) == 5
    assert original_ids.isdisjoint(copy_ids)
    assert _labels([copy]) == _labels([sample_tree[0]])


@pytest.mark.unit
def test_move_bounds():
    """First up and last down are no-ops."""
    a, b, c = text("a"), text("b"), text("c")
    roots = [a, b, c]

    assert not tree.move(roots, a.id, -1)
    assert not tree.move(roots, c.id, 1)
    assert not tree.move(roots, b.id, 0)
    assert roots == [a, b, c]

    assert tree.move(roots, b.id, -1)
    assert roots == [b, a, c]
    assert tree.move(roots, b.id, 2)
    assert roots == [c, a, b]


@pytest.mark.unit
def test_move_inside_container():
    a, b = button("a"), button("b")
    roots = [card(a, b)]
    assert tree.move(roots, a.id, 1)
    assert roots[0].children == [b, a]


@pytest.mark.unit
def test_find_path(sample_tree):
    submit = sample_tree[0].children[1].children[0]
    path = tree.find_path(sample_tree, submit.id)

    assert [item.component_type for item in path] == ["Container", "Card", "Button"]
    assert [item.index for item in path] == [0, 1, 0]
    assert path[-1].id == submit.id
    assert path[-1].name == "Submit"
    assert path[0].display_name() == "Container #1"
    assert tree.find_path(sample_tree, "cmp_missing") is None


@pytest.mark.unit
def test_find_parent(sample_tree):
    card_node = sample_tree[0].children[1]
    assert tree.find_parent(sample_tree, card_node.children[0].id) == card_node.id
    assert tree.find_parent(sample_tree, sample_tree[0].id) is None


@pytest.mark.unit
def test_insert_child_at_clamps(sample_tree):
    box = sample_tree[0]
    first = button("first")
    last = button("last")
    assert tree.insert_child_at(sample_tree, box.id, -5, first)
    assert tree.insert_child_at(sample_tree, box.id, 99, last)
    assert box.children[0] is first
    assert box.children[-1] is last
    assert tree.insert_child_at(sample_tree, None, 0, text("root"))
    assert sample_tree[0].content == "root"
    assert not tree.insert_child_at(sample_tree, sample_tree[-1].id, 0, text("leaf"))


@pytest.mark.unit
def test_move_to_reparents(sample_tree):
    logo = sample_tree[1]
    card_node = sample_tree[0].children[1]
    assert tree.move_to(sample_tree, logo.id, card_node.id, 0)
    assert card_node.children[0] is logo
    assert len(sample_tree) == 1


@pytest.mark.unit
def test_move_to_refuses_own_subtree(sample_tree):
    box = sample_tree[0]
    card_node = box.children[1]
    assert not tree.move_to(sample_tree, box.id, card_node.id, 0)
    assert not tree.move_to(sample_tree, box.id, box.id, 0)
    assert not tree.move_to(sample_tree, box.id, sample_tree[1].id, 0)
    assert not tree.move_to(sample_tree, "cmp_missing", None, 0)
    assert sample_tree[0] is box


@pytest.mark.unit
def test_deep_nesting_beyond_recursion_limit(nested):
    """Searches use an explicit stack."""
    deep = [nested(1500, button("Bottom"))]
    bottom = [node for node, _ in tree.walk(deep)][-1]
    assert bottom.label == "Bottom"
    assert tree.contains(deep, bottom.id)
    assert len(tree.find_path(deep, bottom.id)) == 1501


@given(st.integers(min_value=1, max_value=12))
@settings(max_examples=15, deadline=None)
def test_duplicate_freshness_property(depth):
    node = container(image("x.png"))
    for _ in range(depth):
        node = card(node, text("t"))
    copy = tree.duplicate(node)
    assert set(tree.collect_ids([node])).isdisjoint(tree.collect_ids([copy]))
    assert tree.count_nodes([copy]) == tree.count_nodes([node])
