"""Minimal C-library routines: character classes, strings, heap, formatting, time, division, byte order, files and directories."""

__version__ = "0.1.0"

__all__ = [
    "charclass",
    "strings",
    "heap",
    "fmt",
    "timeutil",
    "udiv",
    "net",
    "files",
    "folder",
]