"""
cli — Argparse entry point and command wiring.
"""

import argparse
import logging
import os
import sys
import textwrap

from . import ui
from .api import ApiClient
from .commands import ALIASES, Command, Context, Options, resolve_project, run_command
from .config import PROJECT_ENV, load_credentials
from .errors import GitzError


def build_parser():
    names = ", ".join([c.value for c in Command] + list(ALIASES))
    parser = argparse.ArgumentParser(
        prog="gitz",
        description="A command-line interface to GitHub issues.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(f"""\
            Commands: {names}  (default: todo)

            Examples:
              gitz todo --project angelos
              gitz add --title XXX --body YYY --project angelos
              gitz edit 1 --title XXX --body YYY --project angelos
              gitz show 1 --project angelos
              gitz close 1 --project angelos
              gitz reopen 1 --project angelos

            You can set the project name with an environment variable:
              export {PROJECT_ENV}=angelos
        """),
    )
    parser.add_argument("command", nargs="?", default=Command.TODO.value,
                        help="subcommand to run")
    parser.add_argument("id", nargs="?", help="issue number (show, close, reopen, edit)")
    parser.add_argument("--title")
    parser.add_argument("--body")
    parser.add_argument("--project", help=f"project name (default: ${PROJECT_ENV})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log HTTP requests to stderr")
    return parser


def setup_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None, environ=None):
    environ = os.environ if environ is None else environ
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    command = Command.parse(args.command)
    if command is None:
        parser.error(f"Unknown command: {args.command}")

    setup_logging(args.verbose)
    ui.setup_encoding()

    options = Options(
        title=args.title,
        body=args.body,
        project=args.project,
    )
    try:
        project = resolve_project(options, environ)
        credentials = load_credentials()
        ctx = Context(
            options=options,
            project=project,
            client=ApiClient(credentials, project),
            issue_id=args.id,
        )
        run_command(command, ctx)
    except GitzError as exc:
        ui.error(str(exc))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
