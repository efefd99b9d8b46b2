"""Result type produced by the tokenizer.

Thread Safety:
Modeline is frozen and its options are a read-only mapping, so results
are hashable and safe to share.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Modeline:
    """A parsed modeline.

    Attributes:
        program: Identifier naming the consuming tool (e.g. "vim", "envctl").
            Never empty.
        options: Decoded option name to value. Boolean options carry
            "true" or "false". Read-only; a copy of the mapping passed in.
        raw_line: The line the modeline was parsed from, without its line
            terminator but otherwise untouched.

    Examples:
        >>> from modeline import parse_line
        >>> m = parse_line("# vim: sw=4 noet")
        >>> m.program, dict(m.options)
        ('vim', {'sw': '4', 'et': 'false'})

    """

    program: str
    options: Mapping[str, str] = field(default_factory=dict)
    raw_line: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def __hash__(self) -> int:
        return hash((self.program, frozenset(self.options.items()), self.raw_line))

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of option ``name``, or ``default`` when unset."""
        return self.options.get(name, default)

    def is_enabled(self, name: str) -> bool:
        """True when ``name`` was given as a plain boolean or ``name=true``."""
        return self.options.get(name) == "true"
