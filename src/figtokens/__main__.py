"""Allow running as ``python -m figtokens``."""

from figtokens.cli import main

if __name__ == "__main__":
    main()
