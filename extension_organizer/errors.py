class OrganizerError(Exception):
    """Base error for the project."""


class ValidationError(OrganizerError):
    """A source or destination directory failed validation."""
