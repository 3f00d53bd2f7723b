# parser/lexer.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Lexical analyzer for compact vector clock notation using SLY

"""Lexical analyzer for compact clock notation strings.

The compact notation writes a clock as its owner followed by a bracketed
list of counters, e.g. ``A[A:2, B:1]``. This module breaks such strings
into tokens for the grammar in ``parser.grammar``.

Supported Tokens:
- Punctuation: [, ], :, ,
- NODE: node identifiers (hostnames such as ``web-1.local`` are accepted)
- NUMBER: non-negative decimal counters
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger

# Starts with a letter/underscore so it never collides with NUMBER
_NODE_PATTERN = r"[a-zA-Z_][a-zA-Z0-9_.\-]*"


class ClockLexer(Lexer):
    """SLY-based lexer for compact clock notation.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "NODE",
        "NUMBER",
        "LBRACKET",
        "RBRACKET",
        "COLON",
        "COMMA",
    }

    ignore = " \t\r\n"

    LBRACKET = r"\["
    RBRACKET = r"\]"
    COLON = r":"
    COMMA = r","

    NODE = _NODE_PATTERN

    @_(r"\d+")
    def NUMBER(self, t):
        t.value = int(t.value)
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Raises:
            ValueError: Always raised with character and position information
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
