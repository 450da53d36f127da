"""Package entry point for ``python -m subtitle_companion``.

Delegates to the CLI's main(). Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.
"""

from subtitle_companion.cli import main

if __name__ == "__main__":
    main()
