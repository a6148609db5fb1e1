"""
Publisher CLI module.

This module provides the command-line interface for Publisher.
"""

from .main import cli, main

__all__ = ["cli", "main"]
