"""ID Generation System.

Component ids are ULIDs with a ``cmp_`` prefix:
- 128-bit, lexicographically sortable (timestamp + 80 random bits)
- readable in logs and exported markup
- never reused; every duplicate or paste mints a fresh id

Ids loaded from documents are opaque strings and need not follow this
format.
"""

from typing import NewType

from ulid import ULID

ComponentId = NewType("ComponentId", str)
"""Canvas component identifier"""

COMPONENT_PREFIX = "cmp"


def new_component_id() -> ComponentId:
    """Generate new component ID."""
    return ComponentId(f"{COMPONENT_PREFIX}_{ULID()}")


__all__ = ["ComponentId", "COMPONENT_PREFIX", "new_component_id"]
