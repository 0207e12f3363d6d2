"""Raw-mode terminal text viewer.

``main`` runs the command-line viewer; the pieces it wires together live in
``runtime``, ``input``, ``render``, ``document`` and ``viewport``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the CLI; imported lazily so ``import youreditor`` stays cheap."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
