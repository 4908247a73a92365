"""Allow running the CLI with ``python -m faststart``."""

from faststart.cli import main

if __name__ == "__main__":
    main()
