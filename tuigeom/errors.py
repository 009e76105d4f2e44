"""Exceptions raised by geometry operations."""


class GeometryError(ValueError):
    """Raised when a geometric operation cannot be carried out."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message