"""Canvas Studio: component tree editing and multi-target code export."""

__version__ = "0.1.0"
