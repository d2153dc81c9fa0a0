"""Allow ``python -m termview``."""

from termview.cli import main

if __name__ == "__main__":
    main()
