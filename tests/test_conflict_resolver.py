import pytest

from extension_organizer.utils.conflict_resolver import ConflictResolver, split_file_name


@pytest.mark.parametrize("filename, expected", [
    ("document.txt", ("document", ".txt")),
    ("archive.tar.gz", ("archive.tar", ".gz")),
    ("noext", ("noext", "")),
    (".bashrc", (".bashrc", "")),
    ("notes.", ("notes.", "")),
])
def test_split_file_name(filename, expected):
    assert split_file_name(filename) == expected


def test_free_destination_is_returned_unchanged(dest_dir):
    resolver = ConflictResolver()
    target = dest_dir / "document.txt"

    assert resolver.resolve_conflict(target) == target
    assert resolver.conflict_count == 0


def test_first_free_counter_is_used(dest_dir, make_file):
    make_file(dest_dir, "document.txt")
    make_file(dest_dir, "document_1.txt")
    resolver = ConflictResolver()

    resolved = resolver.resolve_conflict(dest_dir / "document.txt")

    assert resolved == dest_dir / "document_2.txt"
    assert resolver.get_conflict_stats() == {"total_conflicts": 1}


def test_counter_goes_after_whole_name_without_extension(dest_dir, make_file):
    make_file(dest_dir, "README")
    make_file(dest_dir, "notes.")

    resolver = ConflictResolver()

    assert resolver.resolve_conflict(dest_dir / "README") == dest_dir / "README_1"
    assert resolver.resolve_conflict(dest_dir / "notes.") == dest_dir / "notes._1"


def test_directory_counts_as_conflict(dest_dir):
    (dest_dir / "report.pdf").mkdir()

    assert ConflictResolver().resolve_conflict(dest_dir / "report.pdf") == dest_dir / "report_1.pdf"
