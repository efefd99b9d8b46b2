"""Single-line modeline tokenizer.

Recognizes the two modeline forms:

    first form:   [text]{white}{program}:[white]{options}
    second form:  [text]{white}{program}:[white]se[t] {options}:[text]

and decodes the option tokens into a name to value mapping. An unterminated
second form carries no options: everything after the keyword is ignored
when the closing colon is missing.

No regex for program detection; the line is walked once, left to right,
and the leftmost whitespace-identifier-colon sequence wins.

Thread Safety:
All functions are pure. No module state is mutated.

"""

from __future__ import annotations

from modeline.charsets import BLANK, BLANKS, IDENTIFIER_CHARS, OPTION_SEPARATOR_RE
from modeline.errors import MalformedModelineError, ModelineError, NoModelineError
from modeline.models import Modeline

# Keywords introducing the second form. Longest first.
SECOND_FORM_KEYWORDS: tuple[str, ...] = ("set ", "se ")


def find_program(line: str) -> tuple[str, str] | None:
    """Locate the program identifier in ``line``.

    Looks for a run of spaces/tabs, then one or more identifier characters,
    then a colon.

    Args:
        line: Line text

    Returns:
        ``(program, rest)`` where rest is everything after the colon,
        or None if the line has no such sequence.

    Example:
        >>> find_program("# vim: sw=4")
        ('vim', ' sw=4')
        >>> find_program("vim: sw=4") is None
        True
    """
    n = len(line)
    pos = 0
    while pos < n:
        if line[pos] not in BLANK:
            pos += 1
            continue

        start = pos + 1
        while start < n and line[start] in BLANK:
            start += 1

        end = start
        while end < n and line[end] in IDENTIFIER_CHARS:
            end += 1

        if end > start and end < n and line[end] == ":":
            return line[start:end], line[end + 1 :]

        pos = end

    return None


def extract_option_region(rest: str, line: str = "") -> str:
    """Pick the option-bearing text out of the remainder after ``program:``.

    Second form: text after ``se ``/``set `` up to the next colon, or
    nothing when the closing colon is missing. First form: the whole
    remainder.

    Args:
        rest: Text after the program colon
        line: Original line, carried into the error

    Returns:
        The option region (possibly empty).

    Raises:
        MalformedModelineError: The remainder ends with a colon but does not
            start with ``se``/``set``.
    """
    rest = rest.lstrip(BLANKS)

    for keyword in SECOND_FORM_KEYWORDS:
        if rest.startswith(keyword):
            body = rest[len(keyword) :]
            region, closed, _ = body.partition(":")
            return region if closed else ""

    if rest.rstrip(BLANKS).endswith(":"):
        raise MalformedModelineError(line, "ends with ':' but missing 'se[t]'")

    return rest


def decode_option(token: str) -> tuple[str, str]:
    """Decode one option token into ``(name, value)``.

    - ``key=value`` splits at the first ``=`` (value may be empty)
    - ``noname`` is ``(name, "false")``
    - anything else is ``(token, "true")``

    Example:
        >>> decode_option("sw=4")
        ('sw', '4')
        >>> decode_option("noai")
        ('ai', 'false')
        >>> decode_option("cursorline")
        ('cursorline', 'true')
    """
    name, sep, value = token.partition("=")
    if sep:
        return name, value

    if token.startswith("no") and len(token) > 2:
        return token[2:], "false"

    return token, "true"


def decode_options(region: str) -> dict[str, str]:
    """Split an option region on blanks and colons and decode every token.

    Later tokens win over earlier ones with the same name. Tokens with an
    empty name (``=value``) are dropped.
    """
    options: dict[str, str] = {}
    for token in OPTION_SEPARATOR_RE.split(region):
        if not token:
            continue
        name, value = decode_option(token)
        if name:
            options[name] = value
    return options


def parse_line(line: str) -> Modeline:
    """Parse a single line into a Modeline.

    Args:
        line: Line text, without line terminator

    Returns:
        Modeline whose raw_line is ``line`` unchanged.

    Raises:
        NoModelineError: The line contains no modeline.
        MalformedModelineError: The line holds a broken second form.

    Example:
        >>> m = parse_line("/* vim:set sw=3 foldmethod=marker: */ text")
        >>> m.program, m.options
        ('vim', {'sw': '3', 'foldmethod': 'marker'})
    """
    found = find_program(line)
    if found is None:
        raise NoModelineError(line)

    program, rest = found
    region = extract_option_region(rest, line)
    return Modeline(program=program, options=decode_options(region), raw_line=line)


def try_parse_line(line: str) -> Modeline | None:
    """Parse ``line``, returning None instead of raising on failure."""
    try:
        return parse_line(line)
    except ModelineError:
        return None


__all__ = [
    "SECOND_FORM_KEYWORDS",
    "decode_option",
    "decode_options",
    "extract_option_region",
    "find_program",
    "parse_line",
    "try_parse_line",
]
