"""UPDATE statement builder."""

from dataclasses import dataclass, field

from sqlchain.builder._base import QueryBuilder
from sqlchain.builder._mixins import ReturningClauseMixin, SetClauseMixin, WhereClauseMixin

__all__ = ("Update",)

# SET assignments are joined with AND, not a comma; existing output must not change.
ASSIGNMENT_SEPARATOR = " AND "


@dataclass(repr=False)
class Update(QueryBuilder, SetClauseMixin, WhereClauseMixin, ReturningClauseMixin):
    """Builder for UPDATE statements.

    Without any ``set()`` calls the SET list is rendered empty.
    """

    _values: dict[str, str] = field(default_factory=dict, init=False)
    _conditions: list[str] = field(default_factory=list, init=False)
    _returns: list[str] = field(default_factory=list, init=False)

    def _render(self) -> str:
        assignments = ASSIGNMENT_SEPARATOR.join(f"{column} = {value}" for column, value in self._values.items())
        return f"UPDATE {self.table} SET {assignments}" + self._render_where() + self._render_returning()
