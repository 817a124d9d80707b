"""Entry point: python -m gitz"""

from .cli import main

if __name__ == "__main__":
    main()
