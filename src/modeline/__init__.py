"""
modeline: editor-style modeline extraction for Python

Finds ``vim:``-style directives in the first and last lines of a text file
and parses them into a program name plus an option mapping. Any program
name is accepted, so tools can carry their own per-file settings:

    # envctl: provider=gsm gsm_project=526782592

Both vim forms are understood:

    # vim: sw=4 noet                          (first form)
    /* vim: set sw=4 noet: */ trailing text   (second form)

Quick Start:
    >>> from modeline import parse_line, scan_text
    >>> m = parse_line("# vim:noai:cursorline")
    >>> m.program, m.options
    ('vim', {'ai': 'false', 'cursorline': 'true'})

    >>> # Scan the edges of a document (top and bottom 5 lines by default)
    >>> [m.program for m in scan_text("# vim: sw=3\\nbody\\n")]
    ['vim']

    >>> # Custom windows
    >>> from modeline import Scanner, ScanConfig
    >>> scanner = Scanner(ScanConfig(scan_top=False, scan_bottom=True, max_lines=1))
"""

from collections.abc import Iterable
from pathlib import Path

from modeline.config import DEFAULT_SCAN_CONFIG, ScanConfig
from modeline.errors import MalformedModelineError, ModelineError, NoModelineError
from modeline.models import Modeline
from modeline.scanner import Scanner
from modeline.tokenizer import parse_line, try_parse_line

__version__ = "0.1.0"

_default_scanner = Scanner(DEFAULT_SCAN_CONFIG)


def scan(source: Iterable[str]) -> list[Modeline]:
    """Scan a line source with the default settings.

    Args:
        source: Lines in order (list, generator or open text file)

    Returns:
        Modelines from the top and bottom 5 lines, top first.
    """
    return _default_scanner.scan(source)


def scan_text(text: str) -> list[Modeline]:
    """Scan an in-memory document with the default settings."""
    return _default_scanner.scan_text(text)


def scan_file(path: str | Path) -> list[Modeline]:
    """Scan a file with the default settings.

    Raises:
        OSError: The file could not be opened or read.
    """
    return _default_scanner.scan_file(path)


def scan_string(line: str) -> Modeline:
    """Parse a single line.

    Raises:
        NoModelineError: The line contains no modeline.
        MalformedModelineError: The line holds a broken second form.
    """
    return _default_scanner.scan_string(line)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse_line",
    "try_parse_line",
    "scan",
    "scan_file",
    "scan_string",
    "scan_text",
    # Scanner
    "Scanner",
    "ScanConfig",
    "DEFAULT_SCAN_CONFIG",
    # Result
    "Modeline",
    # Errors
    "ModelineError",
    "NoModelineError",
    "MalformedModelineError",
]
