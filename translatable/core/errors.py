from __future__ import annotations


class TranslatableError(Exception):
    """Base class for errors raised by this package."""


class TranslatableDeclarationError(TranslatableError, TypeError):
    """A model's ``__translatable__`` declaration is malformed."""

    def __init__(self, model: str, declaration: object) -> None:
        self.model = model
        self.declaration = declaration
        super().__init__(
            f"{model}.__translatable__ must be a collection of field names, got {declaration!r}"
        )


class ReservedAttributeError(TranslatableError, AttributeError):
    """Raw write to a name the model class already defines (method, property...)."""

    def __init__(self, model: str, key: str) -> None:
        self.model = model
        self.key = key
        super().__init__(f"{model}.{key} is not a column and cannot be assigned a raw value")
