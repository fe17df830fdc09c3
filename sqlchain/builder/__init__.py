"""SQL statement builders.

This module provides a fluent interface for assembling SQL statements from
caller-supplied fragments and rendering them to query strings.
"""

from sqlchain.builder._base import QueryBuilder
from sqlchain.builder._delete import Delete
from sqlchain.builder._insert import Insert
from sqlchain.builder._join import Join
from sqlchain.builder._select import Order, Select
from sqlchain.builder._update import Update

__all__ = (
    "Delete",
    "Insert",
    "Join",
    "Order",
    "QueryBuilder",
    "Select",
    "Update",
    "delete",
    "insert",
    "select",
    "update",
)


def delete(table: str) -> Delete:
    """Create a DELETE builder.

    Args:
        table: The table to delete from.

    Returns:
        Delete: A new Delete builder bound to ``table``.
    """
    return Delete(table)


def insert(table: str) -> Insert:
    """Create an INSERT builder.

    Args:
        table: The table to insert into.

    Returns:
        Insert: A new Insert builder bound to ``table``.
    """
    return Insert(table)


def select(table: str) -> Select:
    """Create a SELECT builder.

    Args:
        table: The table to select from.

    Returns:
        Select: A new Select builder bound to ``table``. Selects all columns until fields are added.
    """
    return Select(table)


def update(table: str) -> Update:
    """Create an UPDATE builder.

    Args:
        table: The table to update.

    Returns:
        Update: A new Update builder bound to ``table``.
    """
    return Update(table)
