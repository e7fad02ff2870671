"""Terminal output helpers: colored labels and the overwrite prompt."""
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from colorama import Fore, Style

AFFIRMATIVE_ANSWERS = {"y", "yes"}


def _label(text: str, color: str) -> str:
    return f"{color}{Style.BRIGHT}{text}{Style.RESET_ALL}"


def _printable(message: str, stream: TextIO) -> str:
    """Escape characters the stream cannot encode, e.g. undecodable file names."""
    encoding = getattr(stream, "encoding", None) or "utf-8"
    return message.encode(encoding, "backslashreplace").decode(encoding)


def _emit(message: str, stream: TextIO) -> None:
    print(_printable(message, stream), file=stream)


def info(message: str) -> None:
    _emit(message, sys.stdout)


def warning(message: str) -> None:
    _emit(f"{_label('WARNING:', Fore.YELLOW)} {message}", sys.stdout)


def error(message: str) -> None:
    _emit(f"{_label('ERROR:', Fore.RED)} {message}", sys.stderr)


def ask_overwrite(
    archive_path: Path,
    input_func: Optional[Callable[[str], str]] = None,
) -> bool:
    """
    Ask whether an existing archive may be replaced. Only "y" or "yes"
    (any case) count as consent; end of input counts as no.
    """
    prompt = _printable(
        f"{_label('WARNING:', Fore.YELLOW)} {archive_path} already exists. Overwrite? [y/N] ",
        sys.stdout,
    )
    try:
        answer = (input_func or input)(prompt)
    except EOFError:
        print()
        return False
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS
