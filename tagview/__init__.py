"""Public package surface for tagview.

Exports ``main`` for programmatic CLI invocation.
The layout/navigation core lives in ``tagview.text`` and ``tagview.table_model``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
