"""
Escaner: low-level scanning and recognition for Python

A cursor over a contiguous input (characters, bytes, or any sequence of
elements) that tries to recognize a pattern at each position and advances
past it on success. The substrate for hand-written tokenizers and parsers.

Quick Start:
    >>> from escaner import Scanner, Token, TURBOFISH, recognize
    >>> scanner = Scanner("::<>b")
    >>> recognize(TURBOFISH, scanner)
    View('::<>', 0:4)
    >>> recognize(Token.PLUS, scanner)
    Traceback (most recent call last):
    ...
    escaner.errors.UnexpectedToken: 1:5: unexpected token 'b', expected Token.PLUS

Building values:
    >>> from escaner import Number, parse
    >>> parse(Number, b"42", complete=True)
    Number(value=42)

Recognized output is always a View over the original input; nothing is
copied until View.materialize() is called.

Installation:
    pip install escaner              # Zero runtime dependencies
"""

from escaner.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from escaner.errors import (
    ConversionError,
    EscanerError,
    MatcherContractError,
    ParseError,
    ScannerStateError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from escaner.location import SourceLocation
from escaner.matcher import Match, MatchSize, SizedMatch
from escaner.matchers import match_char, match_number, match_pattern
from escaner.patterns import DIGITS, TURBOFISH, Digits, Literal, Pattern
from escaner.recognizer import Recognizable, recognize, recognize_pattern
from escaner.scanner import Scanner
from escaner.tokens import Token
from escaner.view import View
from escaner.visitor import Number, Visitor, parse

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core engine
    "Scanner",
    "View",
    "recognize",
    "recognize_pattern",
    # Contracts
    "Match",
    "MatchSize",
    "SizedMatch",
    "Recognizable",
    # Matchers and patterns
    "match_char",
    "match_number",
    "match_pattern",
    "Pattern",
    "Literal",
    "Digits",
    "DIGITS",
    "TURBOFISH",
    "Token",
    # Visitors
    "Visitor",
    "Number",
    "parse",
    # Errors
    "EscanerError",
    "ParseError",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "ConversionError",
    "ScannerStateError",
    "MatcherContractError",
    # Location
    "SourceLocation",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
