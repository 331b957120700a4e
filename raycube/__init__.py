"""A small first-person raycaster with XPM texture loading, an in-memory image type and text helpers."""

__version__ = "0.1.0"