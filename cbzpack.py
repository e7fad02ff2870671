#!/usr/bin/env python3
"""
cbzpack: Pack directories of page images into stored (uncompressed) .cbz
comic archives, renaming pages into reading order.

Usage:
    python cbzpack.py "Series/Vol 01" "Series/Vol 02" --verify --delete
"""

import argparse
import os
import shutil
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional

import colorama

import console
from archiver import archive_path_for, build_archive
from errors import CbzError, DeletionError
from excludes import DEFAULT_EXCLUDES, Excludes
from models import Config, DirectoryReport, DirectoryStatus
from scanner import scan_directory

__version__ = "0.3.0"

ConfirmFunc = Callable[[Path], bool]


# ── Core pipeline ─────────────────────────────────────────────────────────────

def process_directory(
    directory: Path,
    config: Config,
    excludes: Excludes = DEFAULT_EXCLUDES,
    confirm: Optional[ConfirmFunc] = None,
) -> DirectoryReport:
    """
    Confirm overwrite, scan, build and optionally delete one directory.

    Returns a report for the normal outcomes (created, skipped, blocked);
    raises CbzError when something on disk fails.
    """
    archive_path = archive_path_for(directory)
    report = DirectoryReport(
        directory=directory,
        status=DirectoryStatus.SKIPPED,
        archive_path=archive_path,
    )

    if not config.overwrite and archive_path.exists():
        confirm = confirm or console.ask_overwrite
        if not confirm(archive_path):
            console.info("Not creating cbz")
            return report

    console.info(f"Checking directory... (sidecar files: {excludes.describe()})")
    scan = scan_directory(
        directory,
        verify=config.verify,
        excludes=excludes,
        use_progress=config.use_progress,
    )

    if scan.non_images:
        console.warning(f"Found {len(scan.non_images)} non-images/unsupported images...")
        for path in scan.non_images:
            console.info(f"\t{path}")
        report.status = DirectoryStatus.BLOCKED
        report.non_images = list(scan.non_images)
        return report

    console.info("Creating cbz...")
    build_archive(scan.images, scan.excluded, archive_path, no_rename=config.no_rename)
    report.images_written = len(scan.images)
    report.status = DirectoryStatus.CREATED

    if config.delete:
        console.info("Deleting original files and directory...")
        _remove_tree(directory)

    return report


def _remove_tree(directory: Path) -> None:
    try:
        shutil.rmtree(directory)
    except OSError as e:
        raise DeletionError(f"Failed to remove directory {directory}", directory) from e


def run(
    directories: Iterable[Path],
    config: Config,
    excludes: Excludes = DEFAULT_EXCLUDES,
    confirm: Optional[ConfirmFunc] = None,
) -> List[DirectoryReport]:
    """Process each directory in turn; one failure never stops the rest."""
    reports: List[DirectoryReport] = []
    for directory in directories:
        console.info(f"Processing {directory}...")
        try:
            report = process_directory(directory, config, excludes=excludes, confirm=confirm)
        except CbzError as e:
            report = _failed(directory, e.describe())
        # Unexpected I/O or encoding failures still end only this directory
        except (OSError, ValueError) as e:
            report = _failed(directory, f"Failed to process {directory}: {e}")
        reports.append(report)
    return reports


def _failed(directory: Path, message: str) -> DirectoryReport:
    console.error(message)
    return DirectoryReport(
        directory=directory,
        status=DirectoryStatus.FAILED,
        error=message,
    )


# ── Output ────────────────────────────────────────────────────────────────────

def print_summary(reports: List[DirectoryReport]) -> None:
    print("\n" + "=" * 44)
    print("  cbzpack Summary")
    print("=" * 44)

    for r in reports:
        line = f"  {r.status.value.upper():<8} {r.directory}"
        if r.status is DirectoryStatus.CREATED:
            line += f"  ({r.images_written:,} pages)"
        elif r.status is DirectoryStatus.BLOCKED:
            line += f"  ({len(r.non_images):,} non-images)"
        console.info(line)

    print(f"\n{'─' * 44}")
    for status in DirectoryStatus:
        count = sum(1 for r in reports if r.status is status)
        print(f"  {status.value.capitalize():<8}: {count:>4,}")
    print()


# ── CLI ───────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cbzpack",
        description=(
            "Pack each directory of JPEG/PNG/GIF/WebP images into a stored "
            "DIRECTORY.cbz archive. Pages are renamed 01, 02, ... in sorted "
            "order; ComicInfo.xml is carried over unchanged."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  cbzpack 'Vol 01' 'Vol 02'\n"
            "  cbzpack ~/scans/* --verify --delete\n"
            "  cbzpack 'Vol 01' --no-rename --overwrite\n"
        ),
    )
    parser.add_argument(
        "dirs",
        nargs="+",
        metavar="DIR",
        help="Directory(s) containing images (processed sequentially).",
    )
    parser.add_argument(
        "-n", "--no-rename",
        action="store_true",
        help="Don't rename files; keep original names inside the archive.",
    )
    parser.add_argument(
        "-d", "--delete",
        action="store_true",
        help="Delete the original directory after the archive is written.",
    )
    parser.add_argument(
        "-v", "--verify",
        action="store_true",
        help="Decode every image to catch corrupt files before packing.",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite an existing output file without asking.",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the verify progress bar (useful when piping output to log files).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    colorama.just_fix_windows_console()

    config = Config(
        no_rename=args.no_rename,
        delete=args.delete,
        verify=args.verify,
        overwrite=args.overwrite,
        use_progress=not args.no_progress,
    )
    # abspath, not resolve(): a symlinked directory keeps its own name
    directories = [Path(os.path.abspath(Path(raw).expanduser())) for raw in args.dirs]

    reports = run(directories, config)

    if len(reports) > 1:
        print_summary(reports)

    failed = any(r.status is DirectoryStatus.FAILED for r in reports)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
