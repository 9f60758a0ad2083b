"""Profile store exceptions."""


class ProfileStoreError(Exception):
    """Base exception for all profile store errors."""


class ProfileNotFoundError(ProfileStoreError):
    """Raised when no aircraft profile matches the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Aircraft profile '{name}' not found")


class ProfileConfigError(ProfileStoreError):
    """Raised when the profile document cannot be read or is invalid."""
