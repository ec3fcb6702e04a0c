"""Editing core for a simple text editor: buffer, undo, search, line numbers, menus and settings."""

__version__ = "0.8.18"