"""Edge-window scanner for modelines.

Feeds the first and/or last ``max_lines`` lines of a source to the
tokenizer. The source is read forward exactly once, so plain iterators,
generators and open files all give the same result.

Window arithmetic, with M = max_lines and N = total lines:

    top window      lines 1 .. min(N, M)
    bottom window   lines max(1, N - M + 1) .. N

When both are requested the bottom window skips the lines the top window
already parsed. N is only known once the source is exhausted, so the
bottom window is tracked in a fixed-size ring of the M most recent lines
and reconciled at the end.

Thread Safety:
Scanner holds only its immutable ScanConfig. Each scan() call owns its
ring and result list; one Scanner can be shared freely.

"""

from __future__ import annotations

import io
from collections.abc import Iterable, Iterator
from itertools import islice
from pathlib import Path

from modeline.config import DEFAULT_SCAN_CONFIG, ScanConfig
from modeline.errors import MalformedModelineError, NoModelineError
from modeline.models import Modeline
from modeline.tokenizer import parse_line
from modeline.utils.logger import get_logger

logger = get_logger(__name__)


def strip_line_ending(line: str) -> str:
    """Remove one trailing ``\\n``, ``\\r\\n`` or ``\\r`` from ``line``."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class LineRing:
    """Fixed-capacity ring of ``(lineno, line)`` pairs.

    Pushing past capacity overwrites the oldest entry. Push is O(1);
    nothing is shifted.
    """

    __slots__ = ("_capacity", "_count", "_cursor", "_slots")

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._slots: list[tuple[int, str] | None] = [None] * capacity
        self._cursor = 0  # next slot to write
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def push(self, lineno: int, line: str) -> None:
        self._slots[self._cursor] = (lineno, line)
        self._cursor = (self._cursor + 1) % self._capacity
        if self._count < self._capacity:
            self._count += 1

    def entries(self, skip: int = 0) -> Iterator[tuple[int, str]]:
        """Yield entries oldest to newest, omitting the ``skip`` oldest."""
        oldest = (self._cursor - self._count) % self._capacity
        for offset in range(skip, self._count):
            entry = self._slots[(oldest + offset) % self._capacity]
            assert entry is not None
            yield entry


def bottom_skip_count(config: ScanConfig, total_lines: int, window_size: int) -> int:
    """Number of oldest ring entries the top window already parsed.

    Args:
        config: Active scan configuration
        total_lines: Lines in the whole source
        window_size: Entries held by the ring (``min(total_lines, max_lines)``)

    Returns:
        Entries to skip from the start of the ring.
    """
    if not config.scan_top:
        return 0

    max_lines = config.max_lines
    if total_lines <= max_lines:
        # Top window covered the whole source
        return window_size
    if total_lines < 2 * max_lines:
        # Windows overlap on lines N - M + 1 .. M
        return 2 * max_lines - total_lines
    return 0


class Scanner:
    """Extracts modelines from the edges of a line source.

    Usage:
        >>> scanner = Scanner(ScanConfig(scan_top=True, scan_bottom=True, max_lines=2))
        >>> [m.program for m in scanner.scan_text("# vim: sw=3\\na\\nb\\n# envctl: x\\n")]
        ['vim', 'envctl']

    """

    __slots__ = ("_config",)

    def __init__(self, config: ScanConfig = DEFAULT_SCAN_CONFIG) -> None:
        self._config = config

    @property
    def config(self) -> ScanConfig:
        return self._config

    def __repr__(self) -> str:
        return f"Scanner({self._config!r})"

    def scan(self, source: Iterable[str], *, source_file: str | None = None) -> list[Modeline]:
        """Scan the configured edge windows of ``source``.

        Args:
            source: Lines in order. A trailing line terminator on each line
                is removed before parsing.
            source_file: Name used in debug log records (optional)

        Returns:
            Modelines found, top window first, each window in source order.
            Lines that are not modelines are skipped.

        Raises:
            OSError: Reading the source failed. No partial result is returned.
        """
        config = self._config
        if not config.enabled:
            return []

        lines = iter(source)
        max_lines = config.max_lines
        results: list[Modeline] = []
        lines_seen = 0
        ring = LineRing(max_lines) if config.scan_bottom else None

        if config.scan_top:
            for raw in islice(lines, max_lines):
                lines_seen += 1
                line = strip_line_ending(raw)
                self._collect(line, lines_seen, source_file, results)
                if ring is not None:
                    ring.push(lines_seen, line)

        if ring is None:
            logger.debug(
                "Scanned top %d line(s) of %s: %d modeline(s)",
                lines_seen,
                source_file or "<stream>",
                len(results),
            )
            return results

        for raw in lines:
            lines_seen += 1
            ring.push(lines_seen, strip_line_ending(raw))

        skip = bottom_skip_count(config, lines_seen, len(ring))
        for lineno, line in ring.entries(skip):
            self._collect(line, lineno, source_file, results)

        logger.debug(
            "Scanned %d line(s) of %s (bottom skip %d): %d modeline(s)",
            lines_seen,
            source_file or "<stream>",
            skip,
            len(results),
        )
        return results

    def scan_text(self, text: str) -> list[Modeline]:
        """Scan an in-memory string, split into lines on ``\\n``."""
        return self.scan(io.StringIO(text))

    def scan_file(self, path: str | Path, *, encoding: str = "utf-8") -> list[Modeline]:
        """Open ``path`` and scan it.

        The file handle is closed on every exit path.

        Raises:
            OSError: The file could not be opened or read.
            UnicodeDecodeError: The content is not valid in ``encoding``.
        """
        path = Path(path)
        logger.debug("Scanning %s for modelines", path)
        with path.open(encoding=encoding, newline="\n") as handle:
            return self.scan(handle, source_file=str(path))

    def scan_string(self, line: str) -> Modeline:
        """Parse a single line. The scanner's config plays no part.

        Raises:
            NoModelineError: The line contains no modeline.
            MalformedModelineError: The line holds a broken second form.
        """
        return parse_line(line)

    @staticmethod
    def _collect(
        line: str,
        lineno: int,
        source_file: str | None,
        results: list[Modeline],
    ) -> None:
        try:
            results.append(parse_line(line))
        except NoModelineError:
            return
        except MalformedModelineError as exc:
            located = MalformedModelineError(
                exc.line,
                exc.reason,
                lineno=lineno,
                source_file=source_file or "<stream>",
            )
            logger.debug("Skipping %s", located)


__all__ = [
    "LineRing",
    "Scanner",
    "bottom_skip_count",
    "strip_line_ending",
]
