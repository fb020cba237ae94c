"""Allow ``python -m pratt``."""

from pratt.cli import main

if __name__ == "__main__":
    main()
