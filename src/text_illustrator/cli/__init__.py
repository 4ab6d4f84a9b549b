"""
CLI module for text illustration.

Provides command-line tools for generating illustration plans from text files.
"""

from text_illustrator.cli.suggest import main as suggest_main

__all__ = ["suggest_main"]
