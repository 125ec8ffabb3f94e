"""Domain error taxonomy.

Validation errors are returned inside ``returns`` containers
(``Failure(InvalidName(...))``) rather than raised across the engine, so
callers decide how to surface them. ExportError covers serializer-level
failures only; tree-shape edge cases degrade to placeholder output.
"""


class ValidationError(Exception):
    """Validation failed."""

    def user_message(self) -> str:
        return f"Validation failed: {self}"


class EmptyName(ValidationError):
    def __init__(self) -> None:
        super().__init__("Component name is empty")


class InvalidName(ValidationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Component name '{name}' is invalid: must be a valid identifier")
        self.name = name


class EmptyTemplate(ValidationError):
    def __init__(self) -> None:
        super().__init__("Template is empty")


class InvalidTemplate(ValidationError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Template is invalid: {reason}")
        self.reason = reason


class InvalidPropertyValue(ValidationError):
    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Property '{field}' has invalid value: {reason}")
        self.field = field
        self.reason = reason


class DuplicateId(ValidationError):
    """A node id is already used elsewhere in the tree."""

    def __init__(self, component_id: str) -> None:
        super().__init__(f"Component id '{component_id}' appears more than once")
        self.component_id = component_id


class ExportError(Exception):
    """Code generation failed at the serialization layer."""

    def __init__(self, message: str, target: str | None = None) -> None:
        super().__init__(message)
        self.target = target

    def user_message(self) -> str:
        return f"Export failed: {self}"


__all__ = [
    "ValidationError",
    "EmptyName",
    "InvalidName",
    "EmptyTemplate",
    "InvalidTemplate",
    "InvalidPropertyValue",
    "DuplicateId",
    "ExportError",
]
