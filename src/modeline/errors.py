"""Exception classes for modeline.

Provides the error taxonomy for single-line parsing. Scanning a whole
source swallows these per line; direct callers of ``parse_line`` and
``Scanner.scan_string`` see them raised.

I/O failures are not wrapped: ``OSError`` from the line source propagates
unchanged out of ``Scanner.scan``.
"""

from __future__ import annotations


class ModelineError(Exception):
    """Base exception for all modeline errors.

    Subclass this for specific error categories.
    """

    pass


class NoModelineError(ModelineError):
    """The line does not contain a modeline.

    Expected for ordinary text lines. Raised when no whitespace,
    identifier and colon sequence occurs anywhere in the line.
    """

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__("no modeline found")


class MalformedModelineError(ModelineError):
    """The line looks like a modeline but cannot be parsed.

    Raised for a second-form terminator (trailing ``:``) without the
    ``se``/``set`` keyword. Distinct from NoModelineError so callers can
    warn about broken modelines while ignoring ordinary lines.
    """

    def __init__(
        self,
        line: str,
        reason: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize malformed modeline error with optional location.

        Args:
            line: The offending line, verbatim
            reason: What is wrong with it
            lineno: Line number in the scanned source (1-indexed)
            source_file: Path to source file (optional)
        """
        self.line = line
        self.reason = reason
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + ": "

        super().__init__(f"{location}malformed modeline: {reason}")
