"""Tokenizer, parser and token-listing command for a minimal assignment-and-print language."""

__version__ = "0.1.0"