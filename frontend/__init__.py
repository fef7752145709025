"""
Script Frontend Package

The front end of the scripting language toolchain. Today this is the lexical
scanner; parsing, analysis and execution consume its token stream and live
elsewhere.

Architecture:
    frontend/
    ├── lexer/           # Tokenization and lexical analysis
    └── logger.py        # Namespaced logging helpers

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Scanner, scan_source, scan_into_peekable, tokenize_string

__all__ = [
    # Core scanning API
    "Scanner",
    "scan_source",
    "scan_into_peekable",
    "tokenize_string",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
