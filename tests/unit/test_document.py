"""Tests for the Document façade."""

import pytest
from returns.result import Failure, Success

from canvas_studio.core.json import JSONParseError
from canvas_studio.domain.errors import DuplicateId, InvalidName, InvalidPropertyValue
from canvas_studio.domain.factory import button, card, container, custom, image, text
from canvas_studio.engine import Document, tree
from canvas_studio.templates import TemplateLibrary


def _labels(doc: Document) -> list[str]:
    return [node.display_name() for node, _ in tree.walk(doc.components)]


class TestMutations:
    """Validated, snapshot-recording mutations."""

    def test_add_root_records_snapshot(self, empty_document):
        result = empty_document.add_root(button("Hello"))
        assert isinstance(result, Success)
        assert empty_document.components[0].id == result.unwrap()
        assert empty_document.history.undo_stack()[0].description == "Add Component"

    def test_invalid_node_rejected_without_mutation(self, empty_document):
        result = empty_document.add_root(custom("123bad", "<div>x</div>"))
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidName)
        assert empty_document.components == []
        assert not empty_document.can_undo()

    def test_add_child(self, document):
        box = document.components[0]
        assert document.add_child(box.id, text("Child")) == Success(True)
        assert box.children[-1].content == "Child"
        assert document.history.undo_stack()[0].description == "Add Child Component"

    def test_add_child_to_leaf_is_noop(self, document):
        assert document.add_child(document.components[1].id, text("x")) == Success(False)
        assert not document.can_undo()

    def test_remove_clears_selection_inside_subtree(self, document):
        button_id = document.components[0].children[1].children[0].id
        assert document.select(button_id)
        assert document.remove(document.components[0].id)
        assert document.selected is None
        assert len(document.components) == 1
        assert not document.remove("cmp_missing")

    def test_remove_keeps_unrelated_selection(self, document):
        logo_id = document.components[1].id
        document.select(logo_id)
        document.remove(document.components[0].id)
        assert document.selected == logo_id

    def test_update_validates(self, document):
        logo_id = document.components[1].id
        assert document.update(logo_id, lambda node: setattr(node, "alt", "Brand")) == Success(True)
        assert document.get(logo_id).alt == "Brand"

        rejected = document.update(logo_id, lambda node: setattr(node, "src", ""))
        assert isinstance(rejected.failure(), InvalidPropertyValue)
        assert document.get(logo_id).src != ""

    def test_update_cannot_change_id(self, document):
        logo_id = document.components[1].id
        document.update(logo_id, lambda node: setattr(node, "id", "cmp_other"))
        assert document.components[1].id == logo_id

    def test_replace(self, document):
        old_id = document.components[1].id
        assert document.replace(old_id, button("Swapped")) == Success(True)
        assert document.components[1].label == "Swapped"
        assert document.components[1].id == old_id

    def test_move_descriptions(self, document):
        second = document.components[1].id
        assert document.move_up(second)
        assert document.history.undo_stack()[0].description == "Move Component Up"
        assert not document.move_up(second)
        assert document.move_down(second)
        assert document.history.undo_stack()[0].description == "Move Component Down"

    def test_duplicate_inserts_after_original(self, document):
        card_node = document.components[0].children[1]
        copy_id = document.duplicate(card_node.id)

        siblings = document.components[0].children
        assert siblings[2].id == copy_id
        assert _labels(Document([siblings[2]])) == _labels(Document([card_node]))
        assert set(tree.collect_ids([siblings[2]])).isdisjoint(tree.collect_ids([card_node]))
        assert document.duplicate("cmp_missing") is None

    def test_clear(self, document):
        document.select(document.components[0].id)
        document.clear()
        assert document.components == []
        assert document.selected is None
        assert document.undo()
        assert len(document.components) == 2


class TestIdUniqueness:
    """Ids already in the tree are rejected on every commit path."""

    def _assert_untouched(self, document, before):
        assert document.to_json() == before
        assert not document.can_undo()

    def test_add_root_rejects_existing_id(self, document):
        before = document.to_json()
        logo = document.get(document.components[1].id)
        error = document.add_root(logo).failure()
        assert isinstance(error, DuplicateId)
        assert error.component_id == logo.id
        self._assert_untouched(document, before)

    def test_add_child_rejects_existing_id(self, document):
        before = document.to_json()
        submit = document.get(document.components[0].children[1].children[0].id)
        result = document.add_child(document.components[0].id, card(submit))
        assert result.failure().component_id == submit.id
        self._assert_untouched(document, before)

    def test_repeated_id_inside_new_subtree(self, empty_document):
        inner = button("A")
        result = empty_document.add_root(container(inner, card(inner.model_copy())))
        assert isinstance(result.failure(), DuplicateId)
        assert empty_document.components == []

    def test_replace_rejects_id_used_elsewhere(self, document):
        before = document.to_json()
        title = document.get(document.components[0].children[0].id)
        result = document.replace(document.components[1].id, container(title))
        assert result.failure().component_id == title.id
        self._assert_untouched(document, before)

    def test_replace_may_reuse_ids_of_replaced_subtree(self, document):
        box_id = document.components[0].id
        kept = document.get(box_id).children
        assert document.replace(box_id, card(*reversed(kept))) == Success(True)
        assert [c.id for c in document.components[0].children] == [c.id for c in reversed(kept)]

    def test_update_rejects_child_with_existing_id(self, document):
        before = document.to_json()
        box_id = document.components[0].id
        logo = document.get(document.components[1].id)
        result = document.update(box_id, lambda node: node.children.append(logo))
        assert isinstance(result.failure(), DuplicateId)
        self._assert_untouched(document, before)

    def test_round_trip_after_rejected_duplicates(self, document):
        logo = document.get(document.components[1].id)
        document.add_root(logo)
        document.add_child(document.components[0].id, logo)
        reloaded = Document.from_json(document.to_json())
        assert len(set(tree.collect_ids(reloaded.components))) == len(reloaded)


class TestUndoRedo:
    def test_undo_redo_round_trip(self, empty_document):
        doc = empty_document
        doc.add_root(button("A"))
        doc.add_root(button("B"))
        after = [n.model_copy(deep=True) for n in doc.components]

        assert doc.undo()
        assert _labels(doc) == ["A"]
        assert doc.undo()
        assert doc.components == []
        assert not doc.undo()

        assert doc.redo()
        assert doc.redo()
        assert doc.components == after
        assert not doc.redo()

    def test_undo_redo_restores_selection(self, empty_document):
        doc = empty_document
        states = [([], None)]
        for label in "ABC":
            new_id = doc.add_root(button(label)).unwrap()
            doc.select(new_id)
            states.append((_labels(doc), doc.selected))

        for labels, selected in reversed(states[:-1]):
            assert doc.undo()
            assert (_labels(doc), doc.selected) == (labels, selected)

        for labels, selected in states[1:]:
            assert doc.redo()
            assert (_labels(doc), doc.selected) == (labels, selected)
        assert doc.selected == states[-1][1]

    def test_undo_remove_restores_selection(self, document):
        button_id = document.components[0].children[1].children[0].id
        document.select(button_id)
        document.remove(document.components[0].id)
        assert document.selected is None
        assert document.undo()
        assert document.selected == button_id
        assert document.redo()
        assert document.selected is None

    def test_new_mutation_drops_redo(self, empty_document):
        empty_document.add_root(button("A"))
        empty_document.undo()
        empty_document.add_root(button("B"))
        assert not empty_document.can_redo()

    def test_history_bound(self):
        doc = Document(max_history_size=3)
        for label in "abcde":
            doc.add_root(button(label))
        undone = 0
        while doc.undo():
            undone += 1
        assert undone == 3
        assert _labels(doc) == ["a", "b"]

    def test_restore_to(self, empty_document):
        for label in "abc":
            empty_document.add_root(button(label))
        assert empty_document.restore_to(1)
        assert _labels(empty_document) == ["a"]
        assert empty_document.redo()
        assert _labels(empty_document) == ["a", "b"]

    def test_apply_template_single_snapshot(self, empty_document):
        template = TemplateLibrary.get("login-form")
        ids = empty_document.apply_template(template)
        assert len(ids) == len(template.components)
        assert len(empty_document.history) == 1
        assert empty_document.history.undo_stack()[0].description == "Apply Template: Login Form"
        empty_document.undo()
        assert empty_document.components == []


class TestClipboard:
    def test_copy_paste_remints_ids(self, document):
        source = document.components[0]
        payload = document.copy(source.id)

        result = document.paste(payload)

        pasted = document.get(result.unwrap())
        assert set(tree.collect_ids([pasted])).isdisjoint(tree.collect_ids([source]))
        assert tree.count_nodes([pasted]) == tree.count_nodes([source])

    def test_paste_into_container(self, document):
        payload = document.copy(document.components[1].id)
        card_id = document.components[0].children[1].id
        result = document.paste(payload, parent_id=card_id)
        assert isinstance(result, Success)
        assert document.components[0].children[1].children[-1].id == result.unwrap()

    def test_paste_into_leaf_fails(self, document):
        payload = document.copy(document.components[1].id)
        result = document.paste(payload, parent_id=document.components[1].id)
        assert isinstance(result.failure(), InvalidPropertyValue)

    def test_paste_tolerates_surrounding_text(self, empty_document):
        payload = 'copied: {"kind": "button", "label": "Go",} end'
        result = empty_document.paste(payload)
        assert empty_document.get(result.unwrap()).label == "Go"

    def test_paste_garbage(self, empty_document):
        with pytest.raises(JSONParseError):
            empty_document.paste("nothing here")

    def test_copy_missing(self, document):
        assert document.copy("cmp_missing") is None


class TestPersistence:
    def test_json_round_trip(self, document):
        document.select(document.components[1].id)
        restored = Document.from_json(document.to_json(indent=2))
        assert restored.components == document.components
        assert restored.selected == document.selected

    def test_emoji_survives(self, empty_document):
        empty_document.add_root(text("Launch 🚀"))
        restored = Document.from_json(empty_document.to_json())
        assert restored.components[0].content == "Launch 🚀"

    def test_stale_selection_dropped(self, document):
        data = document.to_dict()
        data["selected"] = "cmp_gone"
        assert Document.from_dict(data).selected is None

    def test_duplicate_ids_rejected(self):
        node = button("x")
        twin = button("y", id=node.id)
        data = Document([node, container(twin)]).to_dict()
        with pytest.raises(DuplicateId):
            Document.from_dict(data)


@pytest.mark.unit
def test_select_unknown_keeps_selection(document):
    first = document.components[0].id
    document.select(first)
    assert not document.select("cmp_missing")
    assert document.selected == first
    assert document.selected_component().id == first
    assert document.select(None)
    assert document.selected is None


@pytest.mark.unit
def test_len_counts_all_nodes(document):
    assert len(document) == 6
    assert len(Document([card(image("a.png"))])) == 2
