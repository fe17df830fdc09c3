"""DELETE statement builder."""

from dataclasses import dataclass, field

from sqlchain.builder._base import QueryBuilder
from sqlchain.builder._mixins import WhereClauseMixin

__all__ = ("Delete",)


@dataclass(repr=False)
class Delete(QueryBuilder, WhereClauseMixin):
    """Builder for DELETE statements.

    Example:
        >>> Delete("users").filter("name = $1").build()
        'DELETE FROM users WHERE name = $1;'
    """

    _conditions: list[str] = field(default_factory=list, init=False)

    def _render(self) -> str:
        return f"DELETE FROM {self.table}" + self._render_where()
