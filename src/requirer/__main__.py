"""Allow ``python -m requirer``."""

from requirer.cli import main

if __name__ == "__main__":
    main()
