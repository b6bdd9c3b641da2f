"""Lexical analyser for the Plus++ teaching language: the lexer and the la command."""

__version__ = "0.1.0"
__all__ = ["lexer", "cli"]