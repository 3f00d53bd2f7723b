# parser/grammar.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# LALR(1) grammar and parser for compact vector clock notation using SLY

"""Compact clock notation grammar implemented with the SLY parser generator.

Grammar:
    clock   := NODE '[' entries ']' | NODE '[' ']'
    entries := entries ',' entry | entry
    entry   := NODE ':' NUMBER

The parser produces ``(owner_id, counters)`` pairs rather than clock
objects, so this package stays importable from ``model``.
"""

from typing import Dict, Tuple

from sly import Parser
from .lexer import ClockLexer
from .exceptions import ParseError
from utils.logger import get_logger


class _ClockParser(Parser):
    """SLY-based LALR(1) parser for compact clock notation.

    Attributes:
        tokens: Token types from ClockLexer
    """

    tokens = ClockLexer.tokens

    @_("NODE LBRACKET entries RBRACKET")
    def clock(self, p) -> Tuple[str, Dict[str, int]]:
        """Owner followed by a non-empty counter list."""
        return p.NODE, p.entries

    @_("NODE LBRACKET RBRACKET")
    def clock(self, p) -> Tuple[str, Dict[str, int]]:
        """Owner with no counters yet."""
        return p.NODE, {}

    @_("entries COMMA entry")
    def entries(self, p) -> Dict[str, int]:
        node, count = p.entry
        if node in p.entries:
            raise ParseError(f"Duplicate counter for node '{node}'")
        p.entries[node] = count
        return p.entries

    @_("entry")
    def entries(self, p) -> Dict[str, int]:
        node, count = p.entry
        return {node: count}

    @_("NODE COLON NUMBER")
    def entry(self, p) -> Tuple[str, int]:
        return p.NODE, p.NUMBER

    def parse(self, text: str) -> Tuple[str, Dict[str, int]]:
        """Parse compact notation into an owner id and its counters.

        Args:
            text: Notation string such as ``A[A:2, B:1]``

        Returns:
            Tuple of the owner id and a fresh counters dictionary

        Raises:
            ParseError: If the input is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing clock notation: {text}")

        if not text.strip():
            raise ParseError("Input clock notation is empty.")

        try:
            result = super().parse(ClockLexer().tokenize(text))
        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

        if result is None:
            raise ParseError("Failed to parse clock notation (syntax error).")
        return result

    def error(self, token):
        """Handle syntax errors during parsing.

        Raises:
            ParseError: Always raises with token position information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of clock notation"

        raise ParseError(error_msg)
