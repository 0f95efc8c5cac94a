# Organizer engine - moves files into per-extension folders

import os
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .extension_classifier import get_folder_name, is_hidden
from .utils.attributes import MoveRecord, move_with_attributes
from .utils.conflict_resolver import ConflictResolver
from .utils.logger import get_logger


class OrganizationResult:
    """Results of one organize run"""

    def __init__(self):
        self.total_files = 0
        self.moved_count = 0
        self.skipped_files = 0
        self.error_files = 0
        self.folders_created = 0
        self.conflicts_resolved = 0
        self.operation_time = 0.0
        self.records: List[MoveRecord] = []
        self.errors = []
        self.processed_folders: Dict[str, int] = {}
        self.dry_run = False

    def add_error(self, file_path: str, error: str):
        """Add an error to the results"""
        self.errors.append({"file": file_path, "error": error})
        self.error_files += 1

    def add_moved_file(self, folder_name: str):
        """Count a file that reached its extension folder"""
        self.moved_count += 1
        self.processed_folders[folder_name] = self.processed_folders.get(folder_name, 0) + 1

    def get_summary(self) -> Dict:
        """Get operation summary"""
        return {
            "total_files": self.total_files,
            "moved_files": self.moved_count,
            "skipped_files": self.skipped_files,
            "error_files": self.error_files,
            "success_rate": round((self.moved_count / self.total_files) * 100, 1) if self.total_files > 0 else 0,
            "folders_created": self.folders_created,
            "conflicts_resolved": self.conflicts_resolved,
            "operation_time": round(self.operation_time, 2),
            "dry_run": self.dry_run,
            "processed_folders": dict(self.processed_folders)
        }


class FileManager:
    """
    Organizes a flat directory into extension folders

    Each regular, non-hidden file directly inside the source directory is
    moved to ``<destination>/<extension>/<name>``, or to
    ``<destination>/no_extension/<name>`` when it has no extension.
    Existing files in the destination are never overwritten: a numbered
    name is chosen instead. Per-file failures are logged and counted but
    never stop the run.
    """

    def __init__(self):
        self.logger = get_logger()

    def organize(self,
                 source_dir: Union[str, Path],
                 dest_dir: Union[str, Path],
                 dry_run: bool = False,
                 progress_callback: Optional[Callable[[MoveRecord], None]] = None) -> OrganizationResult:
        """
        Organize files from source_dir into extension folders under dest_dir

        Both directories must already exist; validation is the caller's job.

        Args:
            source_dir: Directory whose immediate files are organized
            dest_dir: Root under which extension folders are created
            dry_run: Plan moves without touching the filesystem
            progress_callback: Called with the MoveRecord of every attempt

        Returns:
            OrganizationResult with operation details
        """
        result = OrganizationResult()
        result.dry_run = dry_run
        source_path = Path(source_dir)
        dest_path = Path(dest_dir)
        operation_id = f"organize_{int(time.time())}"
        start_time = time.time()

        self.logger.log_operation_start(operation_id, f"Source: {source_path} | Destination: {dest_path}")

        try:
            with os.scandir(source_path) as it:
                entries = list(it)
        except OSError as e:
            self.logger.warning(f"⚠️ Cannot list {source_path}, nothing to organize: {e}")
            return result

        # Folders already provisioned during this run, keyed by folder name
        extension_folders: Dict[str, Path] = {}
        resolver = ConflictResolver()

        for entry in entries:
            if self._should_skip(entry):
                result.skipped_files += 1
                continue

            result.total_files += 1
            folder_name = get_folder_name(entry.name)

            folder = extension_folders.get(folder_name)
            if folder is None:
                folder = self._provision_folder(dest_path / folder_name, dry_run, result)
                if folder is None:
                    result.add_error(entry.path, f"could not create folder {folder_name}")
                    continue
                extension_folders[folder_name] = folder

            destination = folder / entry.name
            if resolver.has_conflict(destination):
                destination = resolver.resolve_conflict(destination)
                result.conflicts_resolved += 1

            if dry_run:
                record = MoveRecord(Path(entry.path), destination)
                self.logger.log_file_action("MOVE", entry.path, str(destination), dry_run=True)
                result.add_moved_file(folder_name)
            else:
                record = move_with_attributes(entry.path, destination)
                if record.moved:
                    self.logger.log_file_action("MOVE", entry.path, str(destination))
                    result.add_moved_file(folder_name)
                else:
                    result.add_error(entry.path, record.error or "move failed")

            result.records.append(record)
            if progress_callback:
                progress_callback(record)

        result.operation_time = time.time() - start_time
        self._log_operation_results(operation_id, result)
        return result

    def _should_skip(self, entry: os.DirEntry) -> bool:
        """Directories and hidden entries stay in the source directory"""
        if is_hidden(entry.name):
            return True
        try:
            return entry.is_dir()
        except OSError:
            return False

    def _provision_folder(self, folder: Path, dry_run: bool, result: OrganizationResult) -> Optional[Path]:
        """Make sure an extension folder exists; None means it could not be created"""
        if folder.is_dir():
            return folder
        if dry_run:
            if folder.exists():
                self.logger.error(f"❌ Cannot use folder, not a directory: {folder}")
                return None
            return folder

        try:
            folder.mkdir()
        except OSError as e:
            self.logger.error(f"❌ Failed to create folder: {folder} ({e})")
            return None

        result.folders_created += 1
        self.logger.debug(f"📁 Created folder: {folder}")
        return folder

    def _log_operation_results(self, operation_id: str, result: OrganizationResult):
        """Log detailed operation results"""
        summary = result.get_summary()
        verb = "Would move" if result.dry_run else "Moved"
        self.logger.log_operation_success(operation_id,
            f"{verb} {summary['moved_files']}/{summary['total_files']} files")
        self.logger.log_stats(summary)

        if result.errors:
            self.logger.warning(f"⚠️ {len(result.errors)} errors occurred")


# Global file manager instance
_global_manager: Optional[FileManager] = None


def get_file_manager() -> FileManager:
    """
    Get or create the global file manager instance

    Returns:
        FileManager instance
    """
    global _global_manager
    if _global_manager is None:
        _global_manager = FileManager()
    return _global_manager


def organize_files(source_dir: Union[str, Path], dest_dir: Union[str, Path]) -> int:
    """Organize a directory and return the number of files moved"""
    return get_file_manager().organize(source_dir, dest_dir).moved_count
