"""Clause mixins shared between the statement builders."""

from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.utils.text import join_fragments

__all__ = ("ReturningClauseMixin", "SetClauseMixin", "WhereClauseMixin")


@trait
class WhereClauseMixin:
    """WHERE conditions, ANDed together in call order."""

    __slots__ = ()
    _conditions: list[str]

    def filter(self, expr: str) -> Self:
        """Filter rows based on a condition (``WHERE`` clause).

        Args:
            expr: The condition fragment, rendered verbatim.

        Returns:
            The current builder instance for method chaining.
        """
        self._conditions.append(expr)
        return self

    def _render_where(self) -> str:
        if not self._conditions:
            return ""
        return " WHERE " + join_fragments(self._conditions, " AND ")


@trait
class SetClauseMixin:
    """Field/value pairs for INSERT and UPDATE statements."""

    __slots__ = ()
    _values: dict[str, str]

    def set(self, field: str, value: str) -> Self:
        """Set a field value. Setting the same field again replaces the value.

        Args:
            field: The column name.
            value: The value fragment, rendered verbatim.

        Returns:
            The current builder instance for method chaining.
        """
        self._values[field] = value
        return self


@trait
class ReturningClauseMixin:
    """RETURNING fields for INSERT and UPDATE statements."""

    __slots__ = ()
    _returns: list[str]

    def returning(self, field: str) -> Self:
        """Add a field to the ``RETURNING`` clause.

        Returns:
            The current builder instance for method chaining.
        """
        self._returns.append(field)
        return self

    def _render_returning(self) -> str:
        if not self._returns:
            return ""
        return " RETURNING " + join_fragments(self._returns, ", ")
