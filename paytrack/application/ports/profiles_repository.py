"""Port for the user's profile."""

from typing import Any, Protocol

from paytrack.domain.models import Profile


class ProfilesRepositoryPort(Protocol):
    """Port exposing the current user's profile."""

    def fetch_profile(self) -> Profile | None:
        """Return the profile, or None when missing."""

    def update_profile(self, patch: dict[str, Any]) -> Profile:
        """Apply a column patch to the profile."""


__all__ = ["ProfilesRepositoryPort"]
