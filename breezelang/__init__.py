"""Lexer, syntax tree node types and a tokenizing command for the Breeze language."""

__version__ = "0.1.0"
__all__ = ["lexer", "parser", "cli"]