"""SQL query templating for ClickHouse-style queries."""

from collections.abc import Mapping
from typing import Any

from .config.settings import config
from .convert import any2string


class SQLHelper:
    """Helper class for building SQL text; it never executes anything."""

    def __init__(self, placeholder: str | None = None):
        """Initialize SQL helper.

        Args:
            placeholder: Prefix that marks a named placeholder (defaults to config.query_placeholder)
        """
        self.placeholder = placeholder or config.query_placeholder

    @staticmethod
    def table_or_query(table: str) -> str:
        """Return a parenthesized query for a table name or query.

        A bare table becomes ``(SELECT * FROM table)``; text containing
        "select" is treated as a query and wrapped in parentheses if needed.
        """
        if "select" in table.lower():
            return table if table.startswith("(") else f"({table})"

        return f"(SELECT * FROM {table})"

    def build_query(self, template: str, replacers: Mapping[str, Any]) -> str:
        """Replace placeholders in template with values.

        Placeholders have the form ``?key``; each value is rendered with
        ``any2string``. Longer keys are replaced first so ``?field`` does not
        clobber ``?fieldName``.

        Args:
            template: Query text with placeholders
            replacers: Mapping of placeholder key (without prefix) to value

        Returns:
            Query text
        """
        qry = template
        for key in sorted(replacers, key=len, reverse=True):
            qry = qry.replace(self.placeholder + key, any2string(replacers[key]))

        return qry

    @staticmethod
    def exists_database_sql(database: str) -> str:
        """Generate the statement that checks whether a database exists."""
        return f"EXISTS DATABASE {database}"

    def table_exists_sql(self, table: str) -> str:
        """Generate a probe query that fails if the table does not exist."""
        return f"SELECT * FROM {self.table_or_query(table)} LIMIT 1"

    @staticmethod
    def drop_table_sql(table: str) -> str:
        """Generate DROP TABLE IF EXISTS statement."""
        return f"DROP TABLE IF EXISTS {table}"

    def select_sql(
        self,
        table: str,
        columns: list[str] | None = None,
        where_clause: str | None = None,
        order_by: str | None = None,
        limit: int | None = None
    ) -> str:
        """Generate SELECT SQL statement.

        Args:
            table: Table name or query (see ``table_or_query``)
            columns: List of columns to select (None for *)
            where_clause: Optional WHERE clause
            order_by: Optional ORDER BY clause
            limit: Optional LIMIT clause

        Returns:
            SQL SELECT statement
        """
        cols = "*" if columns is None else ", ".join(columns)
        source = self.table_or_query(table) if "select" in table.lower() else table
        sql = f"SELECT {cols} FROM {source}"

        if where_clause:
            sql += f" WHERE {where_clause}"

        if order_by:
            sql += f" ORDER BY {order_by}"

        if limit:
            sql += f" LIMIT {limit}"

        return sql
