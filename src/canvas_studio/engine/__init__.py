"""Tree Engine, undo/redo history and the Document façade."""

from . import tree
from .tree import BreadcrumbItem
from .history import History, Snapshot, MAX_HISTORY_SIZE
from .document import Document, DocumentData

__all__ = [
    "tree",
    "BreadcrumbItem",
    "History",
    "Snapshot",
    "MAX_HISTORY_SIZE",
    "Document",
    "DocumentData",
]
