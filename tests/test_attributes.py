import os

from extension_organizer.utils import attributes
from extension_organizer.utils.attributes import FileTimestamps, move_with_attributes

PAST = 1_000_000_000  # 2001-09-09


def test_move_preserves_modification_and_access_time(tmp_path, make_file):
    source = make_file(tmp_path, "document.txt")
    os.utime(source, (PAST + 50, PAST))
    target = tmp_path / "moved" / "document.txt"
    target.parent.mkdir()

    record = move_with_attributes(source, target)

    assert record.moved and record.attributes_restored and record.succeeded
    assert not source.exists()
    stat_result = target.stat()
    assert int(stat_result.st_mtime) == PAST
    assert int(stat_result.st_atime) == PAST + 50


def test_capture_reads_timestamps(tmp_path, make_file):
    source = make_file(tmp_path, "a.txt")
    os.utime(source, (PAST, PAST))

    timestamps = FileTimestamps.capture(source)

    assert timestamps.modified_ns // 1_000_000_000 == PAST
    assert timestamps.access_ns // 1_000_000_000 == PAST


def test_existing_target_is_replaced(tmp_path, make_file):
    source = make_file(tmp_path, "new.txt", "new")
    target = make_file(tmp_path, "old.txt", "old")

    record = move_with_attributes(source, target)

    assert record.succeeded
    assert target.read_text(encoding="utf-8") == "new"


def test_missing_source_is_reported_not_raised(tmp_path):
    record = move_with_attributes(tmp_path / "ghost.txt", tmp_path / "out.txt")

    assert not record.moved
    assert not record.succeeded
    assert record.error


def test_failed_move_leaves_source_in_place(tmp_path, make_file, monkeypatch, caplog):
    source = make_file(tmp_path, "stuck.txt")

    def failing_move(src, dst):
        raise PermissionError("read-only destination")

    monkeypatch.setattr(attributes.shutil, "move", failing_move)

    record = move_with_attributes(source, tmp_path / "elsewhere.txt")

    assert not record.moved
    assert source.exists()
    assert "read-only destination" in record.error
    assert "Failed to move file stuck.txt" in caplog.text


def test_timestamp_failure_keeps_file_moved(tmp_path, make_file, monkeypatch, caplog):
    source = make_file(tmp_path, "photo.jpg", "pixels")
    target = tmp_path / "photo_moved.jpg"

    def failing_utime(*args, **kwargs):
        raise OSError("utime not permitted")

    monkeypatch.setattr(attributes.os, "utime", failing_utime)

    record = move_with_attributes(source, target)

    assert record.moved
    assert not record.attributes_restored
    assert not record.succeeded
    assert target.read_text(encoding="utf-8") == "pixels"
    assert not source.exists()
    assert "could not restore timestamps" in caplog.text
