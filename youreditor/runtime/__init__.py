"""Public runtime orchestration entry points.

Groups the session bootstrap (``run_viewer``) and the event loop used by
tests and the CLI.
"""

from __future__ import annotations


def run_viewer(*args, **kwargs):
    """Lazily import the session entrypoint to keep package imports light."""
    from .app import run_viewer as _run_viewer

    return _run_viewer(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import the loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = ["run_main_loop", "run_viewer"]
