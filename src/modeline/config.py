"""Scan window configuration for modeline.

A ScanConfig says which edges of a source to examine and how many lines
per edge. It is immutable and passed explicitly to a Scanner; there is no
process-wide mutable configuration.

Usage:
    from modeline import Scanner, ScanConfig

    scanner = Scanner(ScanConfig(scan_top=True, scan_bottom=False, max_lines=10))
    results = scanner.scan(lines)

    # From external settings (YAML, framework config, ...)
    config = ScanConfig.from_dict({"max_lines": 3, "unknown_key": "ignored"})

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable window configuration.

    A config with both edge flags off is valid; scanning with it yields
    no results and never reads the source.

    Attributes:
        scan_top: Examine the first ``max_lines`` lines
        scan_bottom: Examine the last ``max_lines`` lines
        max_lines: Lines examined per requested edge (positive)

    """

    scan_top: bool = True
    scan_bottom: bool = True
    max_lines: int = 5

    def __post_init__(self) -> None:
        if isinstance(self.max_lines, bool) or not isinstance(self.max_lines, int):
            raise ValueError(f"max_lines must be an int, got {self.max_lines!r}")
        if self.max_lines < 1:
            raise ValueError(f"max_lines must be positive, got {self.max_lines}")

    @property
    def enabled(self) -> bool:
        """True when at least one edge is scanned."""
        return self.scan_top or self.scan_bottom

    @property
    def top_only(self) -> bool:
        """True when only the top edge is scanned."""
        return self.scan_top and not self.scan_bottom

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({"max_lines": 3, "other": 1})
            >>> config.max_lines
            3

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Settings used by the module-level convenience functions
DEFAULT_SCAN_CONFIG: ScanConfig = ScanConfig()


__all__ = [
    "DEFAULT_SCAN_CONFIG",
    "ScanConfig",
]
