# Name collision handling for organized files

from pathlib import Path
from typing import Tuple, Union

from .logger import get_logger


def split_file_name(filename: str) -> Tuple[str, str]:
    """
    Split a file name into base name and extension on the last dot

    The extension keeps its leading dot. A dot in first or last position
    does not start an extension, so ".bashrc" and "notes." stay whole.

    Args:
        filename: Bare file name

    Returns:
        Tuple of (base_name, extension)
    """
    last_dot = filename.rfind('.')
    if 0 < last_dot < len(filename) - 1:
        return filename[:last_dot], filename[last_dot:]
    return filename, ""


class ConflictResolver:
    """
    Finds a free destination name when the planned one is taken

    Candidates are tried as ``<base>_<n><extension>`` with n counting up
    from 1. The existence probe is not atomic; another writer can still
    take the chosen name before the move happens.
    """

    def __init__(self):
        self.logger = get_logger()
        self.conflict_count = 0

    def has_conflict(self, destination: Union[str, Path]) -> bool:
        """True when any filesystem entry already sits at the destination"""
        path = Path(destination)
        return path.exists() or path.is_symlink()

    def resolve_conflict(self, destination: Union[str, Path]) -> Path:
        """
        Resolve a colliding destination path

        Args:
            destination: Planned destination path

        Returns:
            The planned path if it is free, otherwise the first free
            numbered variant in the same folder
        """
        dest_path = Path(destination)
        if not self.has_conflict(dest_path):
            return dest_path

        self.conflict_count += 1
        self.logger.debug(f"⚠️ File conflict detected: {dest_path}")

        base_name, extension = split_file_name(dest_path.name)
        counter = 1
        while True:
            candidate = dest_path.parent / f"{base_name}_{counter}{extension}"
            if not self.has_conflict(candidate):
                self.logger.debug(f"🔄 Renamed to avoid conflict: {candidate.name}")
                return candidate
            counter += 1

    def get_conflict_stats(self) -> dict:
        return {"total_conflicts": self.conflict_count}

