"""Module entrypoint for ``python -m findword``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and search setup happen in ``findword.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
