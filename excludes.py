"""
Sidecar files carried into the archive untouched.

A file whose name matches one of the names exactly (case-sensitive, no
wildcards) is never run through image classification; it is appended to the
archive after all images under its original name.

  ComicInfo.xml   ComicRack-style metadata read by most comic readers
"""

from pathlib import Path
from typing import Iterable, List


EXCLUDED_FILES = ["ComicInfo.xml"]


class Excludes:
    def __init__(self, names: Iterable[str]) -> None:
        self._names: List[str] = []
        for raw in names:
            name = raw.strip()
            if name and name not in self._names:
                self._names.append(name)

    # ── Public API ────────────────────────────────────────────────────────────

    def matches(self, file_path: Path) -> bool:
        """Return True if the file's name is on the exclusion list."""
        return file_path.name in self._names

    def describe(self) -> str:
        """Human-readable summary of active names."""
        return ", ".join(self._names) if self._names else "none"


DEFAULT_EXCLUDES = Excludes(EXCLUDED_FILES)
