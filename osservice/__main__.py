"""Entry point for `python -m osservice`."""

from .cli import main

if __name__ == "__main__":
    main()
