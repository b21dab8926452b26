"""Allow ``python -m tokencss``."""

from tokencss.cli import main

if __name__ == "__main__":
    main()
