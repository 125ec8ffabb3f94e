"""Component validation.

Rules:
- Custom ``name`` is non-empty and an identifier (``[a-zA-Z_][a-zA-Z0-9_]*``)
- Custom ``template`` is non-empty, at least 3 characters
  and contains at least one tag
- Button ``label`` and Image ``src`` are not blank
- Every other variant is accepted as-is

Validation walks the subtree in pre-order and reports the first failure.
"""

from collections.abc import Collection
import re

from returns.result import Result, Success, Failure

from .components import ComponentBase, ButtonComponent, ImageComponent, CustomComponent
from .errors import (
    ValidationError,
    EmptyName,
    InvalidName,
    EmptyTemplate,
    InvalidTemplate,
    InvalidPropertyValue,
    DuplicateId,
)


IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")
TAG_PATTERN = re.compile(r"<[^>]+>")
MIN_TEMPLATE_LENGTH = 3


class ComponentNameValidator:
    """Validates custom component names."""

    @staticmethod
    def validate(name: str) -> Result[str, ValidationError]:
        if not name.strip():
            return Failure(EmptyName())
        if not IDENTIFIER_PATTERN.fullmatch(name):
            return Failure(InvalidName(name))
        return Success(name)


class HtmlTemplateValidator:
    """Light structural check on custom markup; not a full HTML parser."""

    @staticmethod
    def validate(template: str) -> Result[str, ValidationError]:
        if not template.strip():
            return Failure(EmptyTemplate())
        if len(template) < MIN_TEMPLATE_LENGTH:
            return Failure(InvalidTemplate("template too short"))
        if not TAG_PATTERN.search(template):
            return Failure(InvalidTemplate("template must contain at least one HTML tag"))
        return Success(template)


def _validate_node(node: ComponentBase) -> Result[None, ValidationError]:
    match node:
        case ButtonComponent(label=label) if not label.strip():
            return Failure(InvalidPropertyValue("label", "label cannot be empty"))
        case ImageComponent(src=src) if not src.strip():
            return Failure(InvalidPropertyValue("src", "image source cannot be empty"))
        case CustomComponent():
            name_result = ComponentNameValidator.validate(node.name)
            if isinstance(name_result, Failure):
                return Failure(name_result.failure())
            template_result = HtmlTemplateValidator.validate(node.template or "")
            if isinstance(template_result, Failure):
                return Failure(template_result.failure())
    return Success(None)


def validate(component: ComponentBase) -> Result[None, ValidationError]:
    """
    Validate a component and its whole subtree.

    Args:
        component: Root of the subtree to check

    Returns:
        Success(None), or Failure with the first error in pre-order
    """
    stack: list[ComponentBase] = [component]
    while stack:
        node = stack.pop()
        result = _validate_node(node)
        if isinstance(result, Failure):
            return result
        children = node.children_of()
        if children:
            stack.extend(reversed(children))
    return Success(None)


def check_unique_ids(
    component: ComponentBase, taken: Collection[str] = ()
) -> Result[None, ValidationError]:
    """
    Check that a subtree can join a tree whose ids are ``taken``.

    Fails on the first id (pre-order) that is already taken or that
    repeats inside the subtree itself.
    """
    seen: set[str] = set()
    stack: list[ComponentBase] = [component]
    while stack:
        node = stack.pop()
        if node.id in taken or node.id in seen:
            return Failure(DuplicateId(node.id))
        seen.add(node.id)
        children = node.children_of()
        if children:
            stack.extend(reversed(children))
    return Success(None)


def validate_tree(components: list[ComponentBase]) -> Result[None, ValidationError]:
    """
    Validate a whole design, including id uniqueness across the forest.

    Used when loading documents from disk. Documents check incoming
    subtrees with ``check_unique_ids`` instead.
    """
    seen: set[str] = set()
    stack: list[ComponentBase] = list(reversed(components))
    while stack:
        node = stack.pop()
        if node.id in seen:
            return Failure(DuplicateId(node.id))
        seen.add(node.id)
        result = _validate_node(node)
        if isinstance(result, Failure):
            return result
        children = node.children_of()
        if children:
            stack.extend(reversed(children))
    return Success(None)


__all__ = [
    "ComponentNameValidator",
    "HtmlTemplateValidator",
    "validate",
    "validate_tree",
    "check_unique_ids",
    "IDENTIFIER_PATTERN",
]
