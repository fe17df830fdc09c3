"""sqlchain: chainable builders for SQL statement strings."""

from sqlchain import builder, config, exceptions, utils
from sqlchain.__metadata__ import __version__
from sqlchain.builder import (
    Delete,
    Insert,
    Join,
    Order,
    QueryBuilder,
    Select,
    Update,
    delete,
    insert,
    select,
    update,
)
from sqlchain.config import LoggingConfig
from sqlchain.exceptions import SQLBuilderError, SQLChainError
from sqlchain.utils.logging import configure_logging, get_logger

__all__ = (
    "Delete",
    "Insert",
    "Join",
    "LoggingConfig",
    "Order",
    "QueryBuilder",
    "SQLBuilderError",
    "SQLChainError",
    "Select",
    "Update",
    "__version__",
    "builder",
    "config",
    "configure_logging",
    "delete",
    "exceptions",
    "get_logger",
    "insert",
    "select",
    "update",
    "utils",
)
