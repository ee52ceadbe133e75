from __future__ import annotations

class CyclicForceError(RuntimeError):
    """A deferred computation demanded its own value while being forced."""

    description: str

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"Cyclic force of {description}")

__all__ = ("CyclicForceError",)
