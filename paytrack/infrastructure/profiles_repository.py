"""SQLAlchemy-backed repository for the user profile."""

from typing import Any

from sqlalchemy import text

from paytrack.application.ports.profiles_repository import (
    ProfilesRepositoryPort,
)
from paytrack.domain.models import Profile
from paytrack.infrastructure.user_scoped_repository import (
    UserScopedRepository,
)

PROFILE_COLUMNS = "name, currency_symbol, theme_preference"

SELECT_PROFILE_SQL = text(
    f"""
    SELECT {PROFILE_COLUMNS}
    FROM profiles
    WHERE user_id = :user_id
    """
)


class SqlAlchemyProfilesRepository(
    UserScopedRepository,
    ProfilesRepositoryPort,
):
    """Repository backed by SQLAlchemy for the ``profiles`` table."""

    table_name = "profiles"
    patch_columns = {
        "name": "name",
        "currency_symbol": "currency_symbol",
        "theme_preference": "theme_preference",
    }

    def fetch_profile(self) -> Profile | None:
        """Return the user's profile, or None when missing."""
        rows = self._fetch_rows(
            SELECT_PROFILE_SQL,
            self._params(),
            "load profile",
        )
        if not rows:
            return None
        return self._to_profile(rows[0])

    def update_profile(self, patch: dict[str, Any]) -> Profile:
        """Apply a patch keyed by Profile field names."""
        columns = self._map_patch(patch)
        set_clause = ", ".join(f"{column} = :{column}" for column in columns)
        query = text(
            f"UPDATE profiles SET {set_clause} "
            f"WHERE user_id = :user_id RETURNING {PROFILE_COLUMNS}"
        )
        row = self._write_returning(
            query,
            self._params(**columns),
            "update profile",
        )
        return self._to_profile(row)

    @staticmethod
    def _to_profile(row) -> Profile:
        return Profile(
            name=row.name,
            currency_symbol=row.currency_symbol,
            theme_preference=row.theme_preference,
        )


__all__ = ["SqlAlchemyProfilesRepository"]
