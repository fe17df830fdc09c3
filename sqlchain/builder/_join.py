"""JOIN clause support for SELECT statements."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from sqlchain.exceptions import SQLBuilderError

__all__ = ("Join", "JoinClause")


class Join(str, Enum):
    """The type of ``JOIN`` to perform."""

    LEFT = "LEFT"
    INNER = "INNER"

    @classmethod
    def coerce(cls, kind: Union["Join", str]) -> "Join":
        """Resolve a join kind from the enum or its case-insensitive name.

        Raises:
            SQLBuilderError: If the join type is not supported.
        """
        if isinstance(kind, Join):
            return kind
        if isinstance(kind, str) and kind.upper() in cls.__members__:
            return cls[kind.upper()]
        msg = f"Unsupported join type: {kind!r}"
        raise SQLBuilderError(msg)


@dataclass
class JoinClause:
    """A single joined table, owned by a ``Select`` builder."""

    table: str
    on_left: str
    on_right: str
    kind: Join

    def render(self, alias: Optional[str] = None) -> str:
        """Render the clause, including the alias of the joined table if any."""
        clause = f" {self.kind.value} JOIN {self.table}"
        if alias is not None:
            clause += f" AS {alias}"
        return f"{clause} ON {self.on_left} = {self.on_right}"
