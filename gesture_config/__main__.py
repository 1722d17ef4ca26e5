"""Entry point for the gesture configuration daemon when run as a module."""

from .daemon import main

if __name__ == "__main__":
    main()
