"""Extension Organizer - sort a flat directory into per-extension folders."""

__version__ = "1.0.0"
__app_name__ = "Extension Organizer"

from .errors import OrganizerError, ValidationError
from .extension_classifier import NO_EXTENSION_FOLDER, classify, get_folder_name
from .file_manager import FileManager, OrganizationResult, organize_files
from .utils.attributes import MoveRecord, move_with_attributes

__all__ = [
    "FileManager",
    "MoveRecord",
    "NO_EXTENSION_FOLDER",
    "OrganizationResult",
    "OrganizerError",
    "ValidationError",
    "classify",
    "get_folder_name",
    "move_with_attributes",
    "organize_files",
]
