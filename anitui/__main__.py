"""Module entrypoint for ``python -m anitui``.

Module-mode execution behaves exactly like the ``anitui`` console script.
"""

from .cli import main


if __name__ == "__main__":
    main()
