"""
LEXOR Command-Line Interface
============================

- **lexdump**: dump the token stream of a LEXOR source file

Implemented as a Click application.
"""

__all__ = ["lexdump"]
