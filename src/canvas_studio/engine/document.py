"""
Document: the editable design.

Owns the component forest, the current selection and the undo history.
User-visible mutations follow one sequence:

1. validate the incoming node and check its ids are not already in use
   (``Failure`` leaves the document untouched)
2. capture a snapshot of the pre-mutation state
3. mutate through the Tree Engine
4. record the snapshot only if the mutation actually happened

``*_without_snapshot`` variants skip steps 2 and 4 so that batch
operations (template application, paste of several roots) can record a
single snapshot for the whole batch.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field
from returns.result import Result, Success, Failure

from ..core.config import get_settings
from ..core.id import ComponentId
from ..core.json import extract_json, safe_json_dumps
from ..core.logging_config import get_logger
from ..domain.components import CanvasComponent, ComponentBase, load_component
from ..domain.errors import ValidationError, InvalidPropertyValue
from ..domain.validation import check_unique_ids, validate, validate_tree
from . import tree
from .history import History, Snapshot

logger = get_logger(__name__)


class DocumentData(BaseModel):
    """Persisted document shape."""

    components: list[CanvasComponent] = Field(default_factory=list)
    selected: ComponentId | None = None


class Document:
    """Component forest + selection + history."""

    def __init__(
        self,
        components: list[ComponentBase] | None = None,
        selected: ComponentId | None = None,
        max_history_size: int | None = None,
    ):
        self.components: list[ComponentBase] = components if components is not None else []
        self.selected: ComponentId | None = selected
        self.history = History(max_history_size or get_settings().max_history_size)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self, description: str = "") -> Snapshot:
        return Snapshot.capture(self.components, self.selected, description)

    def record_snapshot(self, description: str) -> None:
        """Push the current state as an undo point."""
        self.history.push(self.snapshot(description))
        logger.debug("snapshot_recorded", description=description, depth=len(self.history))

    def _apply(self, snapshot: Snapshot) -> None:
        self.components = snapshot.restore()
        self.selected = snapshot.selected

    def undo(self) -> bool:
        previous = self.history.undo(self.snapshot())
        if previous is None:
            return False
        self._apply(previous)
        logger.info("undo", description=previous.description)
        return True

    def redo(self) -> bool:
        following = self.history.redo(self.snapshot())
        if following is None:
            return False
        self._apply(following)
        logger.info("redo")
        return True

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def restore_to(self, index: int) -> bool:
        """Jump to ``history.undo_stack()[index]``."""
        target = self.history.restore_to(index, self.snapshot())
        if target is None:
            return False
        self._apply(target)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, component_id: str) -> ComponentBase | None:
        return tree.get(self.components, component_id)

    def find_path(self, component_id: str) -> list[tree.BreadcrumbItem] | None:
        return tree.find_path(self.components, component_id)

    def selected_component(self) -> ComponentBase | None:
        return self.get(self.selected) if self.selected else None

    def select(self, component_id: str | None) -> bool:
        """Select a node (None clears); unknown ids leave the selection unchanged."""
        if component_id is None:
            self.selected = None
            return True
        if not tree.contains(self.components, component_id):
            return False
        self.selected = ComponentId(component_id)
        return True

    def __len__(self) -> int:
        return tree.count_nodes(self.components)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _check_incoming(
        self, component: ComponentBase, replacing: str | None = None
    ) -> Result[None, ValidationError]:
        """
        Validate a subtree about to enter the tree.

        ``replacing`` names the node being swapped out; its subtree's ids
        are free for the incoming one to reuse.
        """
        result = validate(component)
        if isinstance(result, Failure):
            return result
        taken = set(tree.collect_ids(self.components))
        if replacing is not None:
            old = tree.get(self.components, replacing)
            if old is not None:
                taken.difference_update(tree.collect_ids([old]))
        return check_unique_ids(component, taken)

    def add_root(self, component: ComponentBase) -> Result[ComponentId, ValidationError]:
        """Append a validated node to the top-level sequence."""
        result = self._check_incoming(component)
        if isinstance(result, Failure):
            return Failure(result.failure())

        self.record_snapshot("Add Component")
        tree.add_root(self.components, component)
        logger.info("component_added", component_id=component.id, type=component.component_type)
        return Success(component.id)

    def add_root_without_snapshot(self, component: ComponentBase) -> ComponentId:
        tree.add_root(self.components, component)
        return component.id

    def add_child(self, parent_id: str, component: ComponentBase) -> Result[bool, ValidationError]:
        """
        Append a validated node under a Container/Card.

        Returns:
            Success(True) when inserted, Success(False) when the parent is
            missing or cannot hold children, Failure on invalid input or
            an id already in the tree
        """
        result = self._check_incoming(component)
        if isinstance(result, Failure):
            return Failure(result.failure())

        before = self.snapshot("Add Child Component")
        if not tree.add_child(self.components, parent_id, component):
            logger.debug("add_child_rejected", parent_id=parent_id)
            return Success(False)

        self.history.push(before)
        logger.info("child_added", parent_id=parent_id, component_id=component.id)
        return Success(True)

    def add_child_without_snapshot(self, parent_id: str, component: ComponentBase) -> bool:
        return tree.add_child(self.components, parent_id, component)

    def remove(self, component_id: str) -> bool:
        """Remove a node and its subtree; clears the selection if it was inside."""
        before = self.snapshot("Remove Component")
        removed = tree.remove(self.components, component_id)
        if removed is None:
            return False

        self.history.push(before)
        if self.selected and tree.contains([removed], self.selected):
            self.selected = None
        logger.info("component_removed", component_id=component_id)
        return True

    def replace(
        self, component_id: str, new_component: ComponentBase
    ) -> Result[bool, ValidationError]:
        """Swap a node for ``new_component``; the new node keeps ``component_id``."""
        if not tree.contains(self.components, component_id):
            return Success(False)
        candidate = new_component.model_copy(update={"id": ComponentId(component_id)}, deep=True)
        result = self._check_incoming(candidate, replacing=component_id)
        if isinstance(result, Failure):
            return Failure(result.failure())

        self.record_snapshot("Replace Component")
        tree.replace(self.components, component_id, candidate)
        logger.info("component_replaced", component_id=component_id)
        return Success(True)

    def update(
        self, component_id: str, mutator: Callable[[ComponentBase], None]
    ) -> Result[bool, ValidationError]:
        """
        Edit a node's fields through ``mutator``.

        The edit runs on a copy; it is committed only if the edited node
        still validates and adds no id already in the tree. The node's id cannot be changed.
        """
        current = tree.get(self.components, component_id)
        if current is None:
            return Success(False)

        mutator(current)
        current.id = ComponentId(component_id)
        result = self._check_incoming(current, replacing=component_id)
        if isinstance(result, Failure):
            logger.debug("update_rejected", component_id=component_id, error=str(result.failure()))
            return Failure(result.failure())

        self.record_snapshot("Update Component")
        tree.replace(self.components, component_id, current)
        logger.info("component_updated", component_id=component_id)
        return Success(True)

    def move(self, component_id: str, offset: int) -> bool:
        if offset < 0:
            description = "Move Component Up"
        elif offset > 0:
            description = "Move Component Down"
        else:
            return False

        before = self.snapshot(description)
        if not tree.move(self.components, component_id, offset):
            return False
        self.history.push(before)
        logger.info("component_moved", component_id=component_id, offset=offset)
        return True

    def move_up(self, component_id: str) -> bool:
        return self.move(component_id, -1)

    def move_down(self, component_id: str) -> bool:
        return self.move(component_id, 1)

    def move_to(self, component_id: str, new_parent_id: str | None, index: int) -> bool:
        """Reparent a node (drag and drop across containers)."""
        before = self.snapshot("Move Component")
        if not tree.move_to(self.components, component_id, new_parent_id, index):
            return False
        self.history.push(before)
        logger.info("component_reparented", component_id=component_id, parent_id=new_parent_id)
        return True

    def duplicate(self, component_id: str) -> ComponentId | None:
        """Insert a fresh-id copy right after the original among its siblings."""
        original = tree.get(self.components, component_id)
        path = tree.find_path(self.components, component_id)
        if original is None or path is None:
            return None

        copy = tree.duplicate(original)
        parent_id = path[-2].id if len(path) > 1 else None

        self.record_snapshot("Duplicate Component")
        tree.insert_child_at(self.components, parent_id, path[-1].index + 1, copy)
        logger.info("component_duplicated", source_id=component_id, component_id=copy.id)
        return copy.id

    def apply_template(self, template: Any) -> list[ComponentId]:
        """
        Insert a template's components as new roots with one undo point.

        ``template`` is any object with ``name`` and ``instantiate()``.
        """
        self.record_snapshot(f"Apply Template: {template.name}")
        ids = [self.add_root_without_snapshot(component) for component in template.instantiate()]
        logger.info("template_applied", template=template.name, components=len(ids))
        return ids

    def clear(self) -> None:
        if not self.components:
            return
        self.record_snapshot("Clear Canvas")
        self.components = []
        self.selected = None

    # ------------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------------

    def copy(self, component_id: str) -> str | None:
        """Serialize one subtree to JSON for the clipboard."""
        node = tree.get(self.components, component_id)
        if node is None:
            return None
        return safe_json_dumps(node.model_dump(mode="json"))

    def paste(
        self, payload: str, parent_id: str | None = None
    ) -> Result[ComponentId, ValidationError]:
        """
        Insert a copied subtree, always with freshly minted ids.

        The payload may carry surrounding text or minor JSON damage.

        Raises:
            JSONParseError: If no component object can be recovered
            pydantic.ValidationError: If the object is not a component
        """
        node = tree.duplicate(load_component(extract_json(payload)))
        if parent_id is None:
            return self.add_root(node)

        result = self.add_child(parent_id, node)
        if isinstance(result, Failure):
            return Failure(result.failure())
        if not result.unwrap():
            return Failure(InvalidPropertyValue("parent_id", f"'{parent_id}' cannot hold children"))
        return Success(node.id)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return DocumentData(components=self.components, selected=self.selected).model_dump(
            mode="json"
        )

    def to_json(self, indent: int = 0) -> str:
        return safe_json_dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> "Document":
        """
        Build a document from persisted data.

        Raises:
            pydantic.ValidationError: If the data is not a document
            ValidationError: If a node fails validation or ids repeat
        """
        parsed = DocumentData.model_validate(data)
        components: list[ComponentBase] = list(parsed.components)
        result = validate_tree(components)
        if isinstance(result, Failure):
            raise result.failure()

        selected = parsed.selected
        if selected is not None and not tree.contains(components, selected):
            selected = None
        return cls(components, selected, **kwargs)

    @classmethod
    def from_json(cls, text: str, **kwargs: Any) -> "Document":
        return cls.from_dict(extract_json(text, repair=False), **kwargs)


__all__ = ["Document", "DocumentData"]
