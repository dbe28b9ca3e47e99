"""Allow ``python -m pathgraph``."""

from pathgraph.cli import main

if __name__ == "__main__":
    main()
