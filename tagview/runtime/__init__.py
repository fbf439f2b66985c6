"""Public runtime entry points.

This package groups the interactive table bootstrap (`run_table`), the
single-threaded event loop, and the config/records loaders used by the CLI.
"""

from __future__ import annotations


def run_table(*args, **kwargs):
    """Lazily import the app entrypoint to avoid tty setup on import."""
    from .app import run_table as _run_table

    return _run_table(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_table",
    "run_main_loop",
]
