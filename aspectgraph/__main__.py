"""Module entry point for ``python -m aspectgraph``."""

from aspectgraph.cli import main

if __name__ == "__main__":
    main()
