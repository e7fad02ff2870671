import os
import zipfile
from pathlib import Path
from typing import List, Sequence, Tuple

from errors import ArchiveWriteError, FileReadError
from models import ImageInfo

ARCHIVE_SUFFIX = ".cbz"

MIN_PADDING = 2


def archive_path_for(directory: Path) -> Path:
    """
    Replace the directory's extension with .cbz.
    Example: /comics/Vol 01 -> /comics/Vol 01.cbz
    Raises ArchiveWriteError for a path with no name, such as /.
    """
    if not directory.name:
        raise ArchiveWriteError(f"Cannot derive archive name for {directory}", directory)
    return directory.with_suffix(ARCHIVE_SUFFIX)


def padding_width(count: int) -> int:
    """Digits needed for the largest page number, never fewer than two."""
    return max(len(str(count)), MIN_PADDING)


def entry_name(image: ImageInfo, index: int, total: int, no_rename: bool = False) -> str:
    """
    Name of the archive entry for the index-th (1-based) of total images:
    the original file name, or the zero-padded index plus the extension of
    the detected format, e.g. 007.png.
    """
    if no_rename:
        return image.path.name
    return f"{index:0{padding_width(total)}d}.{image.format.extension}"


def _add_entry(zf: zipfile.ZipFile, source: Path, name: str, archive_path: Path) -> None:
    try:
        info = zipfile.ZipInfo.from_file(source, arcname=name, strict_timestamps=False)
        data = source.read_bytes()
    except OSError as e:
        raise FileReadError(f"Failed to read file {source}", source) from e

    info.compress_type = zipfile.ZIP_STORED
    try:
        zf.writestr(info, data)
    # UnicodeEncodeError: undecodable file names kept by --no-rename
    except (OSError, UnicodeError, ValueError) as e:
        raise ArchiveWriteError(
            f"Failed to write {name} to {archive_path}", archive_path
        ) from e


def build_archive(
    images: Sequence[ImageInfo],
    excluded: Sequence[Path],
    archive_path: Path,
    no_rename: bool = False,
) -> int:
    """
    Write images (in order) followed by the excluded sidecar files into a
    stored, uncompressed zip at archive_path. Bytes are copied verbatim.

    The archive is assembled in archive_path + ".tmp" and moved into place
    once finalized, so a failure never leaves a half-written archive behind
    and never clobbers an existing one. Returns the number of entries.
    """
    total = len(images)
    entries: List[Tuple[Path, str]] = [
        (image.path, entry_name(image, index, total, no_rename))
        for index, image in enumerate(images, start=1)
    ]
    entries += [(path, path.name) for path in excluded]

    tmp_path = archive_path.with_name(archive_path.name + ".tmp")
    try:
        zf = zipfile.ZipFile(tmp_path, "w", compression=zipfile.ZIP_STORED)
    except OSError as e:
        raise ArchiveWriteError(f"Failed to create file {archive_path}", archive_path) from e

    try:
        with zf:
            for source, name in entries:
                _add_entry(zf, source, name, archive_path)
            try:
                zf.close()
            except OSError as e:
                raise ArchiveWriteError(f"Failed to finalize {archive_path}", archive_path) from e
        try:
            os.replace(tmp_path, archive_path)
        except OSError as e:
            raise ArchiveWriteError(f"Failed to finalize {archive_path}", archive_path) from e
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    return len(entries)
