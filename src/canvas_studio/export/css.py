"""Stylesheet target."""

from ..core.hash import hash_string
from ..domain.components import (
    ANIMATION_KEYFRAMES,
    AnimationType,
    ComponentBase,
    ContainerComponent,
)
from ..engine import tree
from .base import CodeGenerator, container_declarations

BUTTON_RULES = """\
.btn-primary {
  background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
  color: white;
  border: none;
  padding: 8px 16px;
  border-radius: 6px;
  cursor: pointer;
}

.btn-secondary {
  background: white;
  color: #475569;
  border: 1px solid #cbd5e1;
  padding: 8px 16px;
  border-radius: 6px;
  cursor: pointer;
}

.btn-outline {
  background: transparent;
  color: #3b82f6;
  border: 1px solid #3b82f6;
  padding: 8px 16px;
  border-radius: 6px;
  cursor: pointer;
}

.btn-ghost {
  background: transparent;
  color: #6b7280;
  border: none;
  padding: 8px 16px;
  cursor: pointer;
}

.btn-sm { padding: 4px 12px; font-size: 12px; }
.btn-md { padding: 8px 16px; font-size: 14px; }
.btn-lg { padding: 12px 24px; font-size: 16px; }

"""

KEYFRAMES: dict[AnimationType, str] = {
    AnimationType.FADE_IN: "from { opacity: 0; }\n  to { opacity: 1; }",
    AnimationType.SLIDE_IN_UP: (
        "from { transform: translateY(20px); opacity: 0; }\n  to { transform: translateY(0); opacity: 1; }"
    ),
    AnimationType.SLIDE_IN_DOWN: (
        "from { transform: translateY(-20px); opacity: 0; }\n  to { transform: translateY(0); opacity: 1; }"
    ),
    AnimationType.SLIDE_IN_LEFT: (
        "from { transform: translateX(-20px); opacity: 0; }\n  to { transform: translateX(0); opacity: 1; }"
    ),
    AnimationType.SLIDE_IN_RIGHT: (
        "from { transform: translateX(20px); opacity: 0; }\n  to { transform: translateX(0); opacity: 1; }"
    ),
    AnimationType.BOUNCE: (
        "0%, 100% { transform: translateY(0); }\n  50% { transform: translateY(-10px); }"
    ),
    AnimationType.ZOOM_IN: "from { transform: scale(0.8); opacity: 0; }\n  to { transform: scale(1); opacity: 1; }",
    AnimationType.PULSE: "0%, 100% { opacity: 1; }\n  50% { opacity: 0.5; }",
}


def container_class(node: ContainerComponent) -> str:
    """Stable class name for a container, derived from its id."""
    return f"container-{hash_string(node.id, truncate=8)}"


class CssGenerator(CodeGenerator):
    """
    Button base rules, then one rule per container anywhere in the
    forest (including containers nested in cards), in pre-order, then
    the keyframes of every animation in use.
    """

    name = "css"
    extension = "css"

    def render(self, components: list[ComponentBase]) -> str:
        output = ["/* Generated CSS */\n\n", BUTTON_RULES]
        used: list[AnimationType] = []

        for node, _depth in tree.walk(components):
            if node.animation and node.animation.animation_type != AnimationType.NONE:
                if node.animation.animation_type not in used:
                    used.append(node.animation.animation_type)
            if not isinstance(node, ContainerComponent):
                continue
            output.append(f".{container_class(node)} {{\n")
            output.extend(f"  {declaration}\n" for declaration in container_declarations(node))
            output.append("}\n\n")

        for animation_type in used:
            output.append(
                f"@keyframes {ANIMATION_KEYFRAMES[animation_type]} {{\n  {KEYFRAMES[animation_type]}\n}}\n\n"
            )
        return "".join(output)


__all__ = ["CssGenerator", "container_class", "BUTTON_RULES"]
