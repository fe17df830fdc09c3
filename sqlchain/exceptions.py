from typing import Any, Optional

__all__ = (
    "SQLBuilderError",
    "SQLChainError",
)


class SQLChainError(Exception):
    """Base class for all sqlchain errors.

    The first non-empty positional argument becomes ``detail`` unless
    ``detail`` is passed explicitly.
    """

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        messages = [str(arg) for arg in args if arg]
        if not detail and messages:
            detail = messages.pop(0)
        self.detail = detail
        super().__init__(*messages)

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name} - {self.detail}" if self.detail else name

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(SQLChainError):
    """A builder was configured with a value it cannot render."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "Issues building SQL statement.")
