"""Allow ``python -m bridgecut``."""

from bridgecut.cli import main

if __name__ == "__main__":
    main()
