# Source and destination directory validation

from pathlib import Path
from typing import Optional, Union

from ..errors import ValidationError
from .logger import get_logger


class PathValidator:
    """
    Directory checks performed before an organize run

    The organizer engine assumes both directories exist. This class is
    where that is established: the source must be an existing directory,
    the destination is created when missing and must be a directory.
    """

    SOURCE_INVALID = "Source directory does not exist or is not a directory"
    DEST_NOT_DIRECTORY = "Destination path exists but is not a directory"
    DEST_NOT_CREATABLE = "Could not create destination directory"

    def __init__(self):
        self.logger = get_logger()

    def validate_source_directory(self, path: Union[str, Path]) -> Path:
        """
        Validate source directory for organization

        Args:
            path: Source directory path

        Returns:
            Resolved Path object

        Raises:
            ValidationError: If the path is missing or not a directory
        """
        source_path = Path(path).resolve()

        if not source_path.is_dir():
            self.logger.debug(f"Source directory validation failed: {source_path}")
            raise ValidationError(self.SOURCE_INVALID)

        self.logger.debug(f"✅ Source directory validated: {source_path}")
        return source_path

    def validate_destination_directory(self, path: Union[str, Path], create_if_missing: bool = True) -> Path:
        """
        Validate destination directory, creating it if needed

        Args:
            path: Destination directory path
            create_if_missing: Whether to create directory if it doesn't exist

        Returns:
            Resolved Path object

        Raises:
            ValidationError: If the path is not a directory or cannot be created
        """
        dest_path = Path(path).resolve()

        if not dest_path.exists():
            if not create_if_missing:
                raise ValidationError(f"Destination directory does not exist: {dest_path}")
            try:
                dest_path.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self.logger.debug(f"Cannot create destination directory {dest_path}: {e}")
                raise ValidationError(self.DEST_NOT_CREATABLE) from e
            self.logger.debug(f"📁 Created destination directory: {dest_path}")

        if not dest_path.is_dir():
            raise ValidationError(self.DEST_NOT_DIRECTORY)

        self.logger.debug(f"✅ Destination directory validated: {dest_path}")
        return dest_path


# Global validator instance
_global_validator: Optional[PathValidator] = None


def get_validator() -> PathValidator:
    """
    Get or create the global validator instance

    Returns:
        PathValidator instance
    """
    global _global_validator
    if _global_validator is None:
        _global_validator = PathValidator()
    return _global_validator
