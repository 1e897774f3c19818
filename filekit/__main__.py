"""Allow running filekit as ``python -m filekit``."""

from filekit import main

if __name__ == "__main__":
    main()
