"""Pytest configuration and fixtures."""

import os

import pytest

from canvas_studio.core import get_settings
from canvas_studio.domain.components import ComponentBase, ContainerComponent
from canvas_studio.domain.factory import button, card, container, custom, image, input_, select, text
from canvas_studio.engine import Document
from canvas_studio.export import ExportService


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["STUDIO_LOG_LEVEL"] = "DEBUG"
    os.environ["STUDIO_ENABLE_CACHE"] = "true"
    os.environ.pop("STUDIO_INDENT_WIDTH", None)
    os.environ.pop("STUDIO_EXPORT_PRESET", None)


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Fresh settings read from the test environment."""
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def export_service(settings):
    return ExportService(settings)


# ============================================================================
# Tree Fixtures
# ============================================================================

@pytest.fixture
def sample_tree() -> list[ComponentBase]:
    """
    Two roots:

    container
      text "Title"
      card
        button "Submit"
        input
    image
    """
    return [
        container(
            text("Title"),
            card(button("Submit"), input_("Email")),
        ),
        image("https://example.com/logo.png", "Logo"),
    ]


@pytest.fixture
def every_variant() -> list[ComponentBase]:
    """One node of each variant, nested under a container and a card."""
    return [
        container(
            button("Go"),
            text("Hello"),
            input_("Name"),
            select(["Red", "Green"]),
            image("a.png", "A"),
            card(custom("Widget", "<div>Widget</div>")),
        )
    ]


def build_nested(levels: int, leaf: ComponentBase | None = None) -> ContainerComponent:
    """A chain of ``levels`` containers with ``leaf`` at the bottom."""
    node = container(leaf or text("Deep"))
    for _ in range(levels - 1):
        node = container(node)
    return node


@pytest.fixture
def nested():
    """Builder for container chains of a given depth."""
    return build_nested


@pytest.fixture
def deep_tree() -> list[ComponentBase]:
    return [build_nested(12)]


@pytest.fixture
def document(sample_tree) -> Document:
    return Document(sample_tree, max_history_size=10)


@pytest.fixture
def empty_document() -> Document:
    return Document(max_history_size=10)
