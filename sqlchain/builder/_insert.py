"""INSERT statement builder."""

from dataclasses import dataclass, field

from sqlchain.builder._base import QueryBuilder
from sqlchain.builder._mixins import ReturningClauseMixin, SetClauseMixin
from sqlchain.exceptions import SQLBuilderError
from sqlchain.utils.text import join_fragments

__all__ = ("Insert",)


@dataclass(repr=False)
class Insert(QueryBuilder, SetClauseMixin, ReturningClauseMixin):
    """Builder for INSERT statements.

    Columns and values are emitted pairwise from the same mapping, so the
    value at each position always belongs to the column at that position.
    The column order itself is not guaranteed.
    """

    _values: dict[str, str] = field(default_factory=dict, init=False)
    _returns: list[str] = field(default_factory=list, init=False)

    def _render(self) -> str:
        """Render the INSERT statement.

        Raises:
            SQLBuilderError: If no values have been set.
        """
        if not self._values:
            msg = f"Cannot build INSERT into {self.table} without values. Use set() first."
            raise SQLBuilderError(msg)

        columns = join_fragments(list(self._values), ", ")
        values = join_fragments(list(self._values.values()), ", ")
        return f"INSERT INTO {self.table} ({columns}) VALUES ({values})" + self._render_returning()
