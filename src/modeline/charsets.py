"""Character sets for O(1) classification in the tokenizer.

Usage:
    from modeline.charsets import IDENTIFIER_CHARS

    if char in IDENTIFIER_CHARS:
        ...
"""

import re
import string

# Horizontal whitespace, as a str for strip() calls
BLANKS = " \t"

# Separates the comment leader from the program identifier
BLANK: frozenset[str] = frozenset(BLANKS)

# Program identifiers are ASCII word characters only
IDENTIFIER_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_")

# Option tokens are separated by runs of blanks and colons
OPTION_SEPARATOR_RE = re.compile(r"[ \t:]+")
