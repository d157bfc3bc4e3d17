"""Abstract repository interface (port) for the owner profile."""

from abc import ABC, abstractmethod

from portfolio.domain.entities import Profile


class ProfileRepository(ABC):
    """Port for profile persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_owner(self, owner_scope: str) -> Profile | None:
        """Retrieve the profile bound to one owner scope."""
        ...

    @abstractmethod
    async def get_first(self) -> Profile | None:
        """Retrieve the earliest-created profile, which the public site shows."""
        ...

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Insert the profile, or update it when it already has an ID."""
        ...
