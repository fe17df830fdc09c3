"""Base class for the statement builders.

Builders accumulate caller-supplied SQL fragments through chained method
calls and render them to a query string on demand.
"""

from dataclasses import dataclass, fields

from sqlchain.utils.logging import get_logger, log_fields

__all__ = ("QueryBuilder",)

logger = get_logger("builder")


@dataclass
class QueryBuilder:
    """Base class for SQL query builders."""

    table: str

    def _render(self) -> str:
        """Render the accumulated clauses for this builder type."""
        msg = "Subclasses must implement _render"
        raise NotImplementedError(msg)

    def build(self) -> str:
        """Build the final SQL query.

        Returns:
            str: The rendered SQL statement, terminated by ``;``.
        """
        query = self._render() + ";"
        statement = type(self).__name__.upper()
        logger.debug(
            "Built %s statement for table %r",
            statement,
            self.table,
            extra=log_fields(statement=statement, table=self.table, sql=query),
        )
        return query

    def __str__(self) -> str:
        """String representation of the query.

        Returns:
            str: The SQL string representation of the query.
        """
        return self.build()

    def __repr__(self) -> str:
        state = ", ".join(f"{f.name.lstrip('_')}={getattr(self, f.name)!r}" for f in fields(self))
        return f"{type(self).__name__}({state})"
