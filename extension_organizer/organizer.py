# Main CLI entry point for Extension Organizer

import sys
from pathlib import Path

import click

from . import __app_name__, __version__
from .errors import ValidationError
from .file_manager import get_file_manager, OrganizationResult
from .utils.attributes import MoveRecord
from .utils.logger import setup_logging, get_logger
from .utils.validator import get_validator


class Config:
    """Configuration class for CLI options"""
    def __init__(self):
        self.verbose = False
        self.dry_run = False
        self.source_dir = None
        self.destination_dir = None
        self.log_dir = None


# Global configuration
config = Config()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, '--version', '-V', prog_name=__app_name__)
@click.option('--source', '-s', 'source', required=True, type=click.Path(),
              help='Source directory containing files to organize')
@click.option('--dest', '-d', 'dest', required=True, type=click.Path(),
              help='Destination directory where organized folders will be created')
@click.option('--dry-run', '-n', is_flag=True, help='Preview moves without touching any file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-dir', type=click.Path(file_okay=False, dir_okay=True),
              help='Also write a log file into this directory')
def cli(source, dest, dry_run, verbose, log_dir):
    """
    Organize files into folders named after their extensions

    Every file directly inside SOURCE is moved to DEST/<extension>/.
    Files without an extension go to DEST/no_extension/. Directories
    and hidden files are left alone, existing files are never
    overwritten, and file timestamps are preserved.

    Examples:
        file-organizer --source ./downloads --dest ./sorted
        file-organizer -s ./downloads -d ./sorted --dry-run
    """
    config.source_dir = source
    config.destination_dir = dest
    config.dry_run = dry_run
    config.verbose = verbose
    config.log_dir = log_dir

    logger = setup_logging(verbose=verbose, log_dir=log_dir)
    validator = get_validator()

    try:
        source_path = validator.validate_source_directory(source)

        dest_path = Path(dest)
        if not dest_path.exists() and not dest_path.is_symlink():
            click.echo("Destination directory does not exist. Creating it now...")
        dest_path = validator.validate_destination_directory(dest_path)
    except ValidationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Organizing files from: {source_path}")
    click.echo(f"Moving to: {dest_path}")
    if config.dry_run:
        click.echo("🔍 DRY RUN MODE - No files will be moved")

    try:
        result = get_file_manager().organize(
            source_path,
            dest_path,
            dry_run=config.dry_run,
            progress_callback=_progress_callback
        )
    except Exception as e:
        logger.error(f"❌ Organization failed: {e}")
        click.echo(f"Error organizing files: {e}", err=True)
        sys.exit(1)

    _display_results(result)


def _progress_callback(record: MoveRecord):
    """Per-file progress line"""
    if config.dry_run:
        click.echo(f"Would move: {record.source.name} -> {record.destination}")
    elif record.moved:
        click.echo(f"Moved: {record.source.name} -> {record.destination}")


def _display_results(result: OrganizationResult):
    """Display organization results"""
    if result.dry_run:
        click.echo(f"Would organize {result.moved_count} files.")
    else:
        click.echo(f"Successfully organized {result.moved_count} files.")

    if config.verbose:
        summary = result.get_summary()
        click.echo(f"📁 Folders created: {summary['folders_created']}")
        click.echo(f"🔄 Conflicts resolved: {summary['conflicts_resolved']}")
        click.echo(f"⏭️  Skipped: {summary['skipped_files']}")
        click.echo(f"❌ Errors: {summary['error_files']}")
        for folder_name, count in sorted(summary['processed_folders'].items()):
            click.echo(f"   {folder_name}: {count} files")

    if result.errors:
        click.echo(f"⚠️  {len(result.errors)} files could not be organized:", err=True)
        for error in result.errors[:5]:
            click.echo(f"   • {Path(error['file']).name}: {error['error']}", err=True)

        if len(result.errors) > 5:
            click.echo(f"   ... and {len(result.errors) - 5} more errors", err=True)


def main():
    """Main entry point"""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\n⏹️  Operation cancelled by user", err=True)
        sys.exit(1)
    except Exception as e:
        get_logger().error(f"❌ Unexpected error: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
