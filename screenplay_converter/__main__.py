"""Package entry point for ``python -m screenplay_converter``.

WHY: Users run the converter as ``python -m screenplay_converter draft.txt``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

from screenplay_converter.cli import main

if __name__ == "__main__":
    main()
