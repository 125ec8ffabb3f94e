"""
Tree Engine.

By-id operations over a component forest (``list[ComponentBase]``).

Every search visits siblings left-to-right and descends into a container's
children before moving on to the next sibling (pre-order depth-first); the
first match in that order wins. Traversal uses an explicit stack, so depth
is bounded by memory rather than the interpreter's recursion limit.

Missing ids are never errors: operations return ``False``/``None`` and
leave the forest untouched.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from ..core.id import ComponentId, new_component_id
from ..domain.components import ComponentBase


Forest = list[ComponentBase]
Mutator = Callable[[ComponentBase], None]


@dataclass(frozen=True)
class BreadcrumbItem:
    """One step of the ancestor chain returned by ``find_path``."""

    id: ComponentId
    component_type: str
    index: int
    name: str = ""

    def icon(self) -> str:
        return _ICONS.get(self.component_type, "📄")

    def display_name(self) -> str:
        return f"{self.component_type} #{self.index + 1}"


_ICONS = {
    "Button": "🔘",
    "Text": "📝",
    "Input": "📝",
    "Select": "🔽",
    "Image": "🖼️",
    "Container": "📦",
    "Card": "🃏",
    "Custom": "⚡",
}


# ============================================================================
# Traversal
# ============================================================================


def _slots(components: Forest) -> Iterator[tuple[Forest, int, ComponentBase, int]]:
    """Yield ``(owning_sequence, index, node, depth)`` in pre-order."""
    stack: list[tuple[Forest, int, int]] = [(components, 0, 0)]
    while stack:
        sequence, index, depth = stack.pop()
        if index >= len(sequence):
            continue
        node = sequence[index]
        stack.append((sequence, index + 1, depth))
        yield sequence, index, node, depth
        children = node.children_of()
        if children:
            stack.append((children, 0, depth + 1))


def walk(components: Forest) -> Iterator[tuple[ComponentBase, int]]:
    """Yield ``(node, depth)`` for every node in pre-order; roots have depth 0."""
    for _, _, node, depth in _slots(components):
        yield node, depth


def _locate(components: Forest, component_id: str) -> tuple[Forest, int] | None:
    for sequence, index, node, _ in _slots(components):
        if node.id == component_id:
            return sequence, index
    return None


def _find(components: Forest, component_id: str) -> ComponentBase | None:
    slot = _locate(components, component_id)
    if slot is None:
        return None
    sequence, index = slot
    return sequence[index]


def count_nodes(components: Forest) -> int:
    return sum(1 for _ in _slots(components))


def collect_ids(components: Forest) -> list[ComponentId]:
    """All ids in pre-order."""
    return [node.id for node, _ in walk(components)]


def contains(components: Forest, component_id: str) -> bool:
    return _locate(components, component_id) is not None


# ============================================================================
# Queries
# ============================================================================


def get(components: Forest, component_id: str) -> ComponentBase | None:
    """Return a deep copy of the first node with ``component_id``, or None."""
    node = _find(components, component_id)
    return node.model_copy(deep=True) if node is not None else None


def find_parent(components: Forest, component_id: str) -> ComponentId | None:
    """Id of the container owning ``component_id`` (None for roots or missing ids)."""
    for _, _, node, _ in _slots(components):
        children = node.children_of()
        if children and any(child.id == component_id for child in children):
            return node.id
    return None


def find_path(components: Forest, component_id: str) -> list[BreadcrumbItem] | None:
    """
    Ancestor chain from a root down to ``component_id`` (inclusive).

    Each item carries the node's index within its owning sequence.

    Returns:
        Breadcrumb items, or None when the id is absent
    """
    stack: list[tuple[Forest, int, tuple[BreadcrumbItem, ...]]] = [(components, 0, ())]
    while stack:
        sequence, index, ancestors = stack.pop()
        if index >= len(sequence):
            continue
        node = sequence[index]
        stack.append((sequence, index + 1, ancestors))

        item = BreadcrumbItem(
            id=node.id,
            component_type=node.component_type,
            index=index,
            name=node.display_name(),
        )
        path = ancestors + (item,)
        if node.id == component_id:
            return list(path)

        children = node.children_of()
        if children:
            stack.append((children, 0, path))
    return None


# ============================================================================
# Mutations
# ============================================================================


def add_root(components: Forest, component: ComponentBase) -> None:
    components.append(component)


def add_child(components: Forest, parent_id: str, component: ComponentBase) -> bool:
    """Append to a Container/Card's children; False if the parent is missing or a leaf."""
    parent = _find(components, parent_id)
    if parent is None:
        return False
    children = parent.children_of()
    if children is None:
        return False
    children.append(component)
    return True


def insert_child_at(
    components: Forest, parent_id: str | None, index: int, component: ComponentBase
) -> bool:
    """
    Insert at a position (clamped to the sequence bounds).

    ``parent_id=None`` targets the root sequence.
    """
    if parent_id is None:
        target = components
    else:
        parent = _find(components, parent_id)
        if parent is None:
            return False
        children = parent.children_of()
        if children is None:
            return False
        target = children

    index = max(0, min(index, len(target)))
    target.insert(index, component)
    return True


def remove(components: Forest, component_id: str) -> ComponentBase | None:
    """Detach a node together with its whole subtree; returns the removed node."""
    slot = _locate(components, component_id)
    if slot is None:
        return None
    sequence, index = slot
    return sequence.pop(index)


def update(components: Forest, component_id: str, mutator: Mutator) -> bool:
    """Apply ``mutator`` in place to the first match; False if no node matched."""
    node = _find(components, component_id)
    if node is None:
        return False
    mutator(node)
    return True


def replace(components: Forest, component_id: str, new_component: ComponentBase) -> bool:
    """Swap the node at the matching position for ``new_component``."""
    slot = _locate(components, component_id)
    if slot is None:
        return False
    sequence, index = slot
    sequence[index] = new_component
    return True


def duplicate(component: ComponentBase) -> ComponentBase:
    """Deep copy with a fresh id on the root and on every descendant."""
    copy = component.model_copy(deep=True)
    stack = [copy]
    while stack:
        node = stack.pop()
        node.id = new_component_id()
        children = node.children_of()
        if children:
            stack.extend(children)
    return copy


def move(components: Forest, component_id: str, offset: int) -> bool:
    """
    Swap a node with the sibling ``offset`` positions away.

    Out-of-bounds targets are rejected and leave the forest unchanged.
    """
    slot = _locate(components, component_id)
    if slot is None:
        return False
    sequence, index = slot
    target = index + offset
    if offset == 0 or target < 0 or target >= len(sequence):
        return False
    sequence[index], sequence[target] = sequence[target], sequence[index]
    return True


def move_to(
    components: Forest, component_id: str, new_parent_id: str | None, index: int
) -> bool:
    """
    Reparent a node at ``index`` of ``new_parent_id``'s children (None: roots).

    Refuses to move a node into its own subtree or under a leaf.
    """
    node = _find(components, component_id)
    if node is None:
        return False

    if new_parent_id is not None:
        if new_parent_id == component_id or contains([node], new_parent_id):
            return False
        parent = _find(components, new_parent_id)
        if parent is None or not parent.is_container_like():
            return False

    removed = remove(components, component_id)
    if removed is None:
        return False
    return insert_child_at(components, new_parent_id, index, removed)


__all__ = [
    "BreadcrumbItem",
    "walk",
    "count_nodes",
    "collect_ids",
    "contains",
    "get",
    "find_parent",
    "find_path",
    "add_root",
    "add_child",
    "insert_child_at",
    "remove",
    "update",
    "replace",
    "duplicate",
    "move",
    "move_to",
]
