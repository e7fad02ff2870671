import struct
from pathlib import Path
from typing import List, Optional

from PIL import Image
from tqdm import tqdm

from errors import DirectoryReadError, FileOpenError, FileReadError
from excludes import DEFAULT_EXCLUDES, Excludes
from formats import SNIFF_LENGTH, detect_format
from models import ImageInfo, ScanResult

# Everything Pillow raises for a damaged or truncated image body
DECODE_ERRORS = (
    OSError,
    SyntaxError,
    ValueError,
    EOFError,
    struct.error,
    Image.DecompressionBombError,
)


# ── Progress helpers ──────────────────────────────────────────────────────────

class _NoOpBar:
    """Minimal tqdm-compatible no-op used when not verifying."""
    def __init__(self, *args, **kwargs):
        pass

    def update(self, n=1):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *args):
        pass


def _make_bar(total: int, use_progress: bool):
    if use_progress:
        return tqdm(total=total, unit="file", desc="Verifying files", ncols=80)
    return _NoOpBar()


# ── Listing ───────────────────────────────────────────────────────────────────

def list_paths(directory: Path) -> List[Path]:
    """Return the immediate entries of directory, sorted by name."""
    try:
        paths = list(directory.iterdir())
    except OSError as e:
        raise DirectoryReadError(
            f"Failed to read directory {directory}", directory
        ) from e
    paths.sort()
    return paths


# ── Classification ────────────────────────────────────────────────────────────

def _is_regular_file(path: Path) -> bool:
    # Path.is_file() raises on EACCES before Python 3.14
    try:
        return path.is_file()
    except OSError:
        return False


def decodes(file_path: Path) -> bool:
    """Fully decode the image's pixel data; False if the data is corrupt."""
    try:
        with Image.open(file_path) as image:
            image.load()
    except DECODE_ERRORS:
        return False
    return True


def check_file(file_path: Path, verify: bool = False) -> Optional[ImageInfo]:
    """
    Return ImageInfo if file_path is a supported image, else None.

    The format is guessed from the file's leading bytes, never its name.
    With verify, an image that fails to decode is treated as unsupported.
    Raises FileOpenError / FileReadError only when the file itself is
    unreadable.
    """
    try:
        f = open(file_path, "rb")
    except OSError as e:
        raise FileOpenError(
            f"Failed to open {file_path} for reading", file_path
        ) from e
    with f:
        try:
            header = f.read(SNIFF_LENGTH)
        except OSError as e:
            raise FileReadError(f"Failed to read file {file_path}", file_path) from e

    image_format = detect_format(header)
    if image_format is None:
        return None
    if verify and not decodes(file_path):
        return None
    return ImageInfo(path=file_path, format=image_format)


def scan_directory(
    directory: Path,
    verify: bool = False,
    excludes: Excludes = DEFAULT_EXCLUDES,
    use_progress: bool = True,
) -> ScanResult:
    """
    Partition the entries of directory into images, non-images and
    excluded sidecar files, preserving the sorted listing order.

    Anything that is not a regular file counts as a non-image. A progress
    bar is shown only while verifying, since plain signature checks are fast.
    """
    result = ScanResult()
    paths = list_paths(directory)

    with _make_bar(len(paths), use_progress=verify and use_progress) as bar:
        for path in paths:
            if not _is_regular_file(path):
                result.non_images.append(path)
            elif excludes.matches(path):
                result.excluded.append(path)
            else:
                image_info = check_file(path, verify=verify)
                if image_info is not None:
                    result.images.append(image_info)
                else:
                    result.non_images.append(path)
            bar.update(1)

    return result
