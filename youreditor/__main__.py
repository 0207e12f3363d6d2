"""Module entrypoint for ``python -m youreditor``.

All argument parsing and runtime setup happen in ``youreditor.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
