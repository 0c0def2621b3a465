"""Log every recognition attempt while debugging a grammar."""

import logging

from escaner import DIGITS, ParseError, ScanConfig, Scanner, Token, recognize, scan_config_context

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

scanner = Scanner("12;x")
with scan_config_context(ScanConfig(trace=True)):
    recognize(DIGITS, scanner)
    recognize(Token.SEMICOLON, scanner)
    try:
        recognize(DIGITS, scanner)
    except ParseError as e:
        print(f"error at {e.location}: {e.message}")
