"""Allow ``python -m screencap``."""

from .cli import main

if __name__ == "__main__":
    main()
