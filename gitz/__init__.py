"""
gitz — A command-line interface to GitHub issues.

Usage:
    gitz todo --project NAME           # list open issues
    gitz show 1 --project NAME         # show one issue
    gitz add --title T --body B        # open an issue
    gitz --help                        # CLI flags reference

Credentials are read from ~/.gitz/config.json and asked for on first use.
"""

from .cli import main
