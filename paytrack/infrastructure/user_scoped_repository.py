"""Shared plumbing for repositories scoped to one user."""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from enum import Enum
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from paytrack.application.ports.database import DatabaseEnginePort
from paytrack.domain.exceptions import GatewayError, RecordNotFoundError
from paytrack.infrastructure.logging.logger import get_app_logger


def build_update_sql(
    table: str,
    assignments: list[str],
    returning: str,
):
    """Build an UPDATE limited to one row of the current user.

    Args:
        table: Table name from the repository's constants.
        assignments: Column names, each bound to a parameter of the same name.
        returning: Column list returned by the statement.

    Returns:
        TextClause: Statement expecting ``:id`` and ``:user_id`` parameters.
    """
    set_clause = ", ".join(f"{column} = :{column}" for column in assignments)
    return text(
        f"UPDATE {table} SET {set_clause} "
        f"WHERE id = :id AND user_id = :user_id "
        f"RETURNING {returning}"
    )


class UserScopedRepository:
    """Base class binding every statement to the authenticated user."""

    table_name = ""
    patch_columns: Mapping[str, str] = {}

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        user_id: str,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            user_id: Owner of every row read or written.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        if not user_id:
            raise ValueError("user_id is required for user-scoped access")
        self._db_port = db_port
        self._user_id = user_id
        self._logger = logger or get_app_logger()

    @contextmanager
    def _gateway_call(self, action: str) -> Iterator[None]:
        """Translate driver failures into GatewayError."""
        try:
            yield
        except SQLAlchemyError as exc:
            self._logger.error(
                f"Database error while trying to {action} "
                f"({self.table_name}): {exc}"
            )
            raise GatewayError(f"Failed to {action}") from exc

    def _params(self, **params: Any) -> dict[str, Any]:
        return {"user_id": self._user_id, **params}

    def _fetch_rows(self, query, params: dict[str, Any], action: str):
        with self._gateway_call(action):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                return conn.execute(query, params).all()

    def _write_returning(self, query, params: dict[str, Any], action: str):
        with self._gateway_call(action):
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                row = conn.execute(query, params).first()
        if row is None:
            raise RecordNotFoundError(
                f"No {self.table_name} row matched while trying to {action}"
            )
        return row

    def _delete(self, row_id: str, action: str) -> None:
        query = text(
            f"DELETE FROM {self.table_name} "
            "WHERE id = :id AND user_id = :user_id"
        )
        with self._gateway_call(action):
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                deleted = conn.execute(query, self._params(id=row_id)).rowcount
        if deleted == 0:
            raise RecordNotFoundError(
                f"No {self.table_name} row matched while trying to {action}"
            )

    def _map_patch(self, patch: Mapping[str, Any]) -> dict[str, Any]:
        """Translate domain field names into column names.

        Raises:
            ValueError: If the patch is empty or names an unknown field.
        """
        if not patch:
            raise ValueError("Update patch is empty")
        unknown = sorted(set(patch) - set(self.patch_columns))
        if unknown:
            raise ValueError(
                f"Unknown {self.table_name} fields: {', '.join(unknown)}"
            )
        return {
            self.patch_columns[field]: self._column_value(value)
            for field, value in patch.items()
        }

    @staticmethod
    def _column_value(value: Any) -> Any:
        return value.value if isinstance(value, Enum) else value


__all__ = ["UserScopedRepository", "build_update_sql"]
