"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS tools.

Modules:
- reader: Per-year filename resolution and accident file loading
"""

from .reader import (
    resolve_filename,
    resolve_data_dir,
    read_accidents,
    read_years,
)

__all__ = [
    'resolve_filename',
    'resolve_data_dir',
    'read_accidents',
    'read_years',
]
