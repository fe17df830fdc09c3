"""SELECT statement builder.

Clauses are always rendered in the same order regardless of the order in
which the chained methods were called::

    SELECT ... FROM ... [JOIN ...] [WHERE ...] [GROUP BY ...] [HAVING ...]
    [ORDER BY ...] [LIMIT n] [OFFSET n];
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from typing_extensions import Self

from sqlchain.builder._base import QueryBuilder
from sqlchain.builder._join import Join, JoinClause
from sqlchain.builder._mixins import WhereClauseMixin
from sqlchain.exceptions import SQLBuilderError
from sqlchain.utils.text import join_fragments

__all__ = ("Order", "Select")


class Order(str, Enum):
    """The direction of an ``ORDER BY`` expression."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def coerce(cls, direction: Union["Order", str]) -> "Order":
        """Resolve a direction from the enum or its case-insensitive name.

        Raises:
            SQLBuilderError: If the direction is not ASC or DESC.
        """
        if isinstance(direction, Order):
            return direction
        if isinstance(direction, str) and direction.upper() in cls.__members__:
            return cls[direction.upper()]
        msg = f"Unsupported order direction: {direction!r}"
        raise SQLBuilderError(msg)


def _check_non_negative(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{name} must be a non-negative integer, got {value!r}"
        raise SQLBuilderError(msg)
    return value


@dataclass(repr=False)
class Select(QueryBuilder, WhereClauseMixin):
    """Builder for SELECT statements."""

    _aliases: dict[str, str] = field(default_factory=dict, init=False)
    _fields: list[str] = field(default_factory=list, init=False)
    _order: list[tuple[str, Order]] = field(default_factory=list, init=False)
    _joins: list[JoinClause] = field(default_factory=list, init=False)
    _groupings: list[str] = field(default_factory=list, init=False)
    _havings: list[str] = field(default_factory=list, init=False)
    _conditions: list[str] = field(default_factory=list, init=False)
    _limit: int = field(default=0, init=False)
    _offset: int = field(default=0, init=False)

    def alias(self, table: str, alias: str) -> Self:
        """Set a table alias (``AS``).

        The alias applies to the main table or to a joined table whose name
        matches ``table`` exactly.

        Args:
            table: The table name to alias.
            alias: The alias to render after ``AS``.

        Returns:
            Select: The current builder instance for method chaining.
        """
        self._aliases[table] = alias
        return self

    def fields(self, fields: Iterable[str]) -> Self:
        """Add fields to the result set. Without any fields ``*`` is selected.

        Args:
            fields: The field fragments to append.

        Returns:
            Select: The current builder instance for method chaining.
        """
        self._fields.extend(fields)
        return self

    def group_by(self, val: str) -> Self:
        """Group the result set on a common value (``GROUP BY`` clause).

        Returns:
            Select: The current builder instance for method chaining.
        """
        self._groupings.append(val)
        return self

    def having(self, expr: str) -> Self:
        """Filter groups on an aggregate expression (``HAVING`` clause).

        Returns:
            Select: The current builder instance for method chaining.
        """
        self._havings.append(expr)
        return self

    def order_by(self, expr: str, direction: Union[Order, str] = Order.ASC) -> Self:
        """Order the result set on the value of an expression (``ORDER BY`` clause).

        Args:
            expr: The expression to order on.
            direction: ``Order.ASC``/``Order.DESC`` or the equivalent string.

        Returns:
            Select: The current builder instance for method chaining.
        """
        self._order.append((expr, Order.coerce(direction)))
        return self

    def join(self, table: str, on_left: str, on_right: str, kind: Union[Join, str] = Join.INNER) -> Self:
        """Add a JOIN clause. Joins are rendered in call order.

        Args:
            table: The table to join.
            on_left: Left-hand side of the ``ON`` equality.
            on_right: Right-hand side of the ``ON`` equality.
            kind: ``Join.LEFT``/``Join.INNER`` or the equivalent string.

        Returns:
            Select: The current builder instance for method chaining.
        """
        self._joins.append(JoinClause(table=table, on_left=on_left, on_right=on_right, kind=Join.coerce(kind)))
        return self

    def left_join(self, table: str, on_left: str, on_right: str) -> Self:
        """Add LEFT JOIN clause.

        Returns:
            Select: The current builder instance for method chaining.
        """
        return self.join(table, on_left, on_right, Join.LEFT)

    def inner_join(self, table: str, on_left: str, on_right: str) -> Self:
        """Add INNER JOIN clause.

        Returns:
            Select: The current builder instance for method chaining.
        """
        return self.join(table, on_left, on_right, Join.INNER)

    def limit(self, limit: int) -> Self:
        """Limit the number of rows in the result set. ``0`` removes the limit.

        Raises:
            SQLBuilderError: If ``limit`` is not a non-negative integer.

        Returns:
            Select: The current builder instance for method chaining.
        """
        self._limit = _check_non_negative("limit", limit)
        return self

    def offset(self, offset: int) -> Self:
        """Skip rows of the result set. ``0`` removes the offset.

        Raises:
            SQLBuilderError: If ``offset`` is not a non-negative integer.

        Returns:
            Select: The current builder instance for method chaining.
        """
        self._offset = _check_non_negative("offset", offset)
        return self

    def _render(self) -> str:
        columns = join_fragments(self._fields, ", ") if self._fields else "*"
        query = f"SELECT {columns} FROM {self.table}"

        if self.table in self._aliases:
            query += f" AS {self._aliases[self.table]}"

        for join in self._joins:
            query += join.render(self._aliases.get(join.table))

        query += self._render_where()

        if self._groupings:
            query += " GROUP BY " + join_fragments(self._groupings, ", ")

        if self._havings:
            query += " HAVING " + join_fragments(self._havings, " AND ")

        if self._order:
            # order items are concatenated without a separator
            query += " ORDER BY " + "".join(f"{expr} {direction.value}" for expr, direction in self._order)

        if self._limit:
            query += f" LIMIT {self._limit}"

        if self._offset:
            query += f" OFFSET {self._offset}"

        return query
