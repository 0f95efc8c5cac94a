# Timestamp-preserving file move

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .logger import get_logger


@dataclass(frozen=True)
class FileTimestamps:
    """Timestamps captured from a file before it is moved"""
    access_ns: int
    modified_ns: int
    created: Optional[float] = None

    @classmethod
    def capture(cls, path: Union[str, Path]) -> "FileTimestamps":
        stat_result = os.stat(path)
        # st_birthtime exists on macOS/BSD and on Windows from 3.12
        created = getattr(stat_result, "st_birthtime", None)
        return cls(stat_result.st_atime_ns, stat_result.st_mtime_ns, created)

    def apply(self, path: Union[str, Path]):
        """Write access and modification times back onto a path"""
        # There is no portable setter for creation time; a same-device rename keeps it
        os.utime(path, ns=(self.access_ns, self.modified_ns))


@dataclass
class MoveRecord:
    """Outcome of one move attempt"""
    source: Path
    destination: Path
    moved: bool = False
    attributes_restored: bool = False
    error: Optional[str] = None
    timestamps: Optional[FileTimestamps] = None

    @property
    def succeeded(self) -> bool:
        return self.moved and self.attributes_restored


def move_with_attributes(source: Union[str, Path], destination: Union[str, Path]) -> MoveRecord:
    """
    Move a file and carry its timestamps over to the new location

    Timestamp restoration runs after the move and can fail on its own.
    In that case the file stays moved, ``record.moved`` is True and
    ``record.attributes_restored`` is False. Nothing is rolled back.

    Args:
        source: File to move
        destination: Exact destination path; an existing file there is replaced

    Returns:
        MoveRecord describing what happened
    """
    logger = get_logger()
    record = MoveRecord(Path(source), Path(destination))

    try:
        record.timestamps = FileTimestamps.capture(record.source)
        shutil.move(str(record.source), str(record.destination))
        record.moved = True
    except OSError as e:
        record.error = str(e)
        logger.error(f"❌ Failed to move file {record.source.name}: {e}")
        return record

    try:
        record.timestamps.apply(record.destination)
        record.attributes_restored = True
    except OSError as e:
        record.error = str(e)
        logger.warning(f"⚠️ Moved {record.source.name} but could not restore timestamps: {e}")

    return record
