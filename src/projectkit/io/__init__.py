"""File I/O helpers."""
