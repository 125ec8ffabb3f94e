"""Tests for the template library."""

import pytest
from returns.result import Success

from canvas_studio.domain.validation import validate_tree
from canvas_studio.engine import tree
from canvas_studio.templates import TemplateCategory, TemplateLibrary


@pytest.mark.unit
def test_builtin_templates():
    ids = {template.id for template in TemplateLibrary.list_all()}
    assert ids == {
        "login-form",
        "contact-form",
        "hero-section",
        "pricing-card",
        "navigation-bar",
        "footer",
        "dashboard-header",
        "feature-grid",
    }


@pytest.mark.unit
@pytest.mark.parametrize("template", TemplateLibrary.list_all(), ids=lambda t: t.id)
def test_templates_validate(template):
    assert validate_tree(template.components) == Success(None)


@pytest.mark.unit
def test_instantiate_mints_fresh_ids():
    template = TemplateLibrary.get("feature-grid")
    first = tree.collect_ids(template.instantiate())
    second = tree.collect_ids(template.instantiate())
    assert len(first) == tree.count_nodes(template.components)
    assert set(first).isdisjoint(second)
    assert set(first).isdisjoint(tree.collect_ids(template.components))


@pytest.mark.unit
def test_by_category():
    forms = TemplateLibrary.by_category(TemplateCategory.FORM)
    assert {t.id for t in forms} == {"login-form", "contact-form"}
    assert TemplateLibrary.by_category(TemplateCategory.CUSTOM) == []


@pytest.mark.unit
def test_search():
    assert [t.id for t in TemplateLibrary.search("PASSWORD")] == ["login-form"]
    assert TemplateLibrary.search("nothing-matches-this") == []


@pytest.mark.unit
def test_get_missing():
    assert TemplateLibrary.get("nope") is None
